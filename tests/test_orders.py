"""
Tests for orders endpoints.
"""

import json

import pytest

from conftest import order_payload


class TestCreateOrder:
    """Tests for POST /api/orders"""

    def test_create_order_success(self, client, requester):
        response = client.post('/api/orders', json=order_payload(requester.id))

        assert response.status_code == 201
        assert response.json['status'] == 'pending'
        assert response.json['price'] == 15.5
        assert response.json['runner_id'] is None

    def test_create_order_missing_fields(self, client, requester):
        response = client.post('/api/orders', json={'requester_id': requester.id, 'price': 10})

        assert response.status_code == 400
        assert 'Missing required fields' in response.json['error']

    def test_create_order_zero_price(self, client, requester):
        response = client.post('/api/orders', json=order_payload(requester.id, price=0))

        assert response.status_code == 400

    @pytest.mark.parametrize('literal', ['NaN', 'Infinity'])
    def test_create_order_non_finite_price(self, client, requester, literal):
        body = json.dumps(order_payload(requester.id)).replace('"price": 15.5', f'"price": {literal}')

        response = client.post('/api/orders', data=body, content_type='application/json')

        assert response.status_code == 400
        assert client.get('/api/orders').json == []

    def test_create_order_unknown_requester(self, client, db_session):
        response = client.post('/api/orders', json=order_payload(99999))

        assert response.status_code == 404

    def test_create_order_non_object_body(self, client, db_session):
        response = client.post('/api/orders', json=['not', 'an', 'object'])

        assert response.status_code == 400


class TestListOrders:
    """Tests for GET /api/orders"""

    def test_list_orders_empty(self, client, db_session):
        response = client.get('/api/orders')

        assert response.status_code == 200
        assert response.json == []

    def test_list_newest_first(self, client, requester):
        first = client.post('/api/orders', json=order_payload(requester.id)).json
        second = client.post('/api/orders', json=order_payload(requester.id)).json

        ids = [o['id'] for o in client.get('/api/orders').json]

        assert ids == [second['id'], first['id']]

    def test_list_by_requester(self, client, requester, make_user):
        other = make_user()
        mine = client.post('/api/orders', json=order_payload(requester.id)).json
        client.post('/api/orders', json=order_payload(other.id))

        response = client.get(f'/api/orders?role=requester&user_id={requester.id}')

        assert [o['id'] for o in response.json] == [mine['id']]

    def test_list_invalid_status(self, client, db_session):
        response = client.get('/api/orders?status=lost')

        assert response.status_code == 400


class TestOrderStatusEndpoints:
    """Tests for PATCH /api/orders/:id/status and cancel-acceptance"""

    def test_accept_then_second_accept_conflicts(self, client, pending_order, make_user):
        first, second = make_user(), make_user()
        url = f'/api/orders/{pending_order.id}/status'

        ok = client.patch(url, json={'status': 'accepted', 'runner_id': first.id})
        lost = client.patch(url, json={'status': 'accepted', 'runner_id': second.id})

        assert ok.status_code == 200
        assert ok.json['runner_id'] == first.id
        assert lost.status_code == 409

    def test_confirm_pending_conflicts(self, client, pending_order):
        response = client.patch(f'/api/orders/{pending_order.id}/status', json={'status': 'confirmed'})

        assert response.status_code == 409
        order = client.get(f'/api/orders/{pending_order.id}').json
        assert order['status'] == 'pending'

    def test_unknown_order(self, client, db_session):
        response = client.patch('/api/orders/99999/status', json={'status': 'cancelled'})

        assert response.status_code == 404

    def test_non_string_status(self, client, pending_order):
        response = client.patch(f'/api/orders/{pending_order.id}/status', json={'status': ['accepted']})

        assert response.status_code == 400

    def test_fractional_runner_id_rejected(self, client, pending_order, runner):
        response = client.patch(f'/api/orders/{pending_order.id}/status',
                                json={'status': 'accepted', 'runner_id': runner.id + 0.9})

        assert response.status_code == 400
        order = client.get(f'/api/orders/{pending_order.id}').json
        assert order['status'] == 'pending'
        assert order['runner_id'] is None

    def test_integral_float_runner_id_accepted(self, client, pending_order, runner):
        response = client.patch(f'/api/orders/{pending_order.id}/status',
                                json={'status': 'accepted', 'runner_id': float(runner.id)})

        assert response.status_code == 200
        assert response.json['runner_id'] == runner.id

    def test_cancel_acceptance_wrong_runner(self, client, pending_order, runner, make_user):
        intruder = make_user()
        client.patch(f'/api/orders/{pending_order.id}/status',
                     json={'status': 'accepted', 'runner_id': runner.id})

        response = client.patch(f'/api/orders/{pending_order.id}/cancel-acceptance',
                                json={'runner_id': intruder.id})

        assert response.status_code == 403
        order = client.get(f'/api/orders/{pending_order.id}').json
        assert order['status'] == 'accepted'
        assert order['runner_id'] == runner.id

    def test_cancel_acceptance_by_runner(self, client, pending_order, runner):
        client.patch(f'/api/orders/{pending_order.id}/status',
                     json={'status': 'accepted', 'runner_id': runner.id})

        response = client.patch(f'/api/orders/{pending_order.id}/cancel-acceptance',
                                json={'runner_id': runner.id})

        assert response.status_code == 200
        assert response.json == {'success': True}
        order = client.get(f'/api/orders/{pending_order.id}').json
        assert order['status'] == 'pending'
        assert order['runner_id'] is None

    def test_cancel_acceptance_requires_runner_id(self, client, pending_order):
        response = client.patch(f'/api/orders/{pending_order.id}/cancel-acceptance', json={})

        assert response.status_code == 400


class TestEndToEnd:

    def test_create_list_accept_flow(self, client, requester, runner):
        created = client.post('/api/orders', json=order_payload(requester.id, price=15.5))
        assert created.status_code == 201
        order_id = created.json['id']

        pending = client.get('/api/orders?status=pending').json
        listed = next(o for o in pending if o['id'] == order_id)
        assert listed['price'] == 15.5
        assert listed['requester_name'] == requester.nickname
        assert listed['requester_avatar'] == requester.avatar_url

        accepted = client.patch(f'/api/orders/{order_id}/status',
                                json={'status': 'accepted', 'runner_id': runner.id})
        assert accepted.status_code == 200

        mine = client.get(f'/api/orders?role=runner&user_id={runner.id}').json
        assert [o['id'] for o in mine] == [order_id]
        assert mine[0]['status'] == 'accepted'
        assert client.get('/api/orders?status=pending').json == []

        client.patch(f'/api/orders/{order_id}/status', json={'status': 'completed_by_runner'})
        done = client.patch(f'/api/orders/{order_id}/status', json={'status': 'confirmed'})
        assert done.json['status'] == 'confirmed'

        titles = [n['title'] for n in client.get(f'/api/notifications?user_id={runner.id}').json]
        assert titles == ['订单已完成']
