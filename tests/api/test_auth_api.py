"""
API tests for login and the current principal
"""


def test_login_success(client, admin_user):
    response = client.post('/api/login', json={'username': 'admin', 'password': 'testpassword123'})

    assert response.status_code == 200
    body = response.json()
    assert body['success'] is True
    assert body['token']
    assert body['user'] == {'id': admin_user.id, 'username': 'admin', 'role': 'admin'}


def test_login_records_last_login(client, db_session, admin_user):
    client.post('/api/login', json={'username': 'admin', 'password': 'testpassword123'})

    db_session.refresh(admin_user)
    assert admin_user.last_login_at is not None


def test_token_from_login_is_accepted(client, admin_user):
    token = client.post('/api/login', json={'username': 'admin', 'password': 'testpassword123'}).json()['token']

    response = client.get('/api/auth/me', headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == 200
    assert response.json()['username'] == 'admin'
    assert response.json()['fullName'] == admin_user.full_name


def test_wrong_password(client, admin_user):
    response = client.post('/api/login', json={'username': 'admin', 'password': 'nope'})

    assert response.status_code == 401
    assert response.json()['message'] == 'Invalid credentials'


def test_unknown_user(client):
    response = client.post('/api/login', json={'username': 'ghost', 'password': 'whatever1'})

    assert response.status_code == 401


def test_inactive_user_cannot_login(client, db_session, admin_user):
    admin_user.is_active = False
    db_session.commit()

    response = client.post('/api/login', json={'username': 'admin', 'password': 'testpassword123'})

    assert response.status_code == 401


def test_missing_fields(client):
    assert client.post('/api/login', json={'username': 'admin'}).status_code == 400


def test_me_requires_token(client):
    response = client.get('/api/auth/me')

    assert response.status_code == 401
    assert response.headers['WWW-Authenticate'] == 'Bearer'
