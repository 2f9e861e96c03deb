from wordlink import create_app, get_registry


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_health_counts_rooms(client, registry):
    assert client.get('/health').get_json() == {'status': 'ok', 'rooms': 0}
    registry.create_room('sid-a', 'Ana')
    assert client.get('/health').get_json() == {'status': 'ok', 'rooms': 1}


def test_categories_command(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['categories'])
    assert result.exit_code == 0
    first = get_registry(flask_app).categories[0]
    assert f'  0  {first}' in result.output


def test_category_override():
    class Cfg:
        TESTING = True
        ROOM_CATEGORIES = ['Fruit', 'Trees']
        ROOM_CODE_SEED = 5

    app = create_app(Cfg)
    assert get_registry(app).categories == ('Fruit', 'Trees')


def test_each_app_has_its_own_registry(flask_app):
    other = create_app(type('Cfg', (), {'TESTING': True}))
    get_registry(flask_app).create_room('sid-a', 'Ana')
    assert len(get_registry(other)) == 0
