def test_index_serves_client(client):
    res = client.get('/')
    assert res.status_code == 200
    assert b'Mini Golf' in res.data


def test_status_counts(client, connect):
    assert client.get('/status').get_json() == {'players': 0, 'rooms': 1}
    a = connect()
    a.emit('player_join', {})
    a.emit('create_room', {'name': 'Sala'})
    assert client.get('/status').get_json() == {'players': 1, 'rooms': 2}
