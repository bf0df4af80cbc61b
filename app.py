from flask import Flask, request, jsonify, session
from core.ordering_system import OrderingSystem
import atexit
import uuid

import config


def _session_id():
    # Get or create session ID
    if 'session_id' not in session:
        session['session_id'] = str(uuid.uuid4())
    return session['session_id']


def _result(result, status_code=400):
    """Translate a service result into a JSON response"""
    if result.get('success'):
        return jsonify(result)
    if result.get('not_found'):
        status_code = 404
    return jsonify({'error': result.get('error', 'Request failed')}), status_code


def create_app(ordering_system=None):
    app = Flask(__name__)
    app.secret_key = config.SECRET_KEY

    system = ordering_system
    if system is None:
        # The app owns this system, so stop its timers when the process exits
        system = OrderingSystem()
        atexit.register(system.shutdown)
    app.extensions['ordering_system'] = system

    @app.route('/api/menu')
    def menu():
        """Menu items, optionally filtered by ?category="""
        return jsonify(system.list_menu(request.args.get('category')))

    @app.route('/api/cart')
    def cart_details():
        return jsonify(system.get_cart_details(_session_id()))

    @app.route('/api/cart/items', methods=['POST'])
    def add_cart_item():
        data = request.get_json(silent=True) or {}
        item_id = data.get('item_id')
        if not item_id:
            return jsonify({'error': 'item_id is required.'}), 400
        try:
            quantity = int(data.get('quantity', 1))
        except (TypeError, ValueError):
            return jsonify({'error': 'quantity must be a number.'}), 400

        return _result(system.add_to_cart(
            _session_id(), item_id, quantity, data.get('special_instructions')
        ))

    @app.route('/api/cart/items/<item_id>', methods=['PATCH'])
    def update_cart_item(item_id):
        data = request.get_json(silent=True) or {}
        session_id = _session_id()

        if 'special_instructions' in data:
            result = system.update_instructions(session_id, item_id, data['special_instructions'])
            if not result['success']:
                return _result(result)
        if 'quantity' in data:
            try:
                quantity = int(data['quantity'])
            except (TypeError, ValueError):
                return jsonify({'error': 'quantity must be a number.'}), 400
            result = system.update_quantity(session_id, item_id, quantity)
            if not result['success']:
                return _result(result)

        return jsonify(system.get_cart_details(session_id))

    @app.route('/api/cart/items/<item_id>', methods=['DELETE'])
    def remove_cart_item(item_id):
        return _result(system.remove_from_cart(_session_id(), item_id))

    @app.route('/api/cart', methods=['DELETE'])
    def clear_cart():
        return _result(system.clear_cart(_session_id()))

    @app.route('/api/orders', methods=['POST'])
    def place_order():
        """Checkout the session cart"""
        data = request.get_json(silent=True) or {}
        result = system.place_order(
            _session_id(), data.get('table_number'), data.get('customer_name')
        )
        if result['success']:
            return jsonify(result), 201
        return _result(result)

    @app.route('/api/orders/<order_id>')
    def order_details(order_id):
        return _result(system.get_order_details(order_id))

    @app.route('/api/orders/<order_id>/tracking')
    def order_tracking(order_id):
        return _result(system.track_order(order_id))

    @app.route('/api/orders/<order_id>/tracking', methods=['DELETE'])
    def stop_order_tracking(order_id):
        """The client stopped watching this order"""
        system.stop_tracking(order_id)
        return jsonify({'success': True, 'order_id': order_id, 'tracking': False})

    @app.route('/api/orders/<order_id>/status', methods=['POST'])
    def order_status(order_id):
        data = request.get_json(silent=True) or {}
        if not data.get('status'):
            return jsonify({'error': 'status is required.'}), 400
        return _result(system.update_order_status(order_id, data['status']))

    @app.route('/api/orders/<order_id>/cancel', methods=['POST'])
    def cancel_order(order_id):
        return _result(system.cancel_order(order_id))

    @app.route('/api/kitchen')
    def kitchen_board():
        return jsonify(system.get_kitchen_board())

    @app.route('/api/kitchen/<order_id>/<action>', methods=['POST'])
    def kitchen_action(order_id, action):
        return _result(system.apply_kitchen_action(order_id, action))

    @app.route('/api/admin/dashboard')
    def dashboard():
        return jsonify(system.get_dashboard())

    @app.route('/api/clear-session', methods=['POST'])
    def clear_session():
        """Clear the cart and session"""
        if 'session_id' in session:
            system.end_session(session['session_id'])
        session.clear()
        return jsonify({'message': 'Session cleared.'})

    @app.route('/health')
    def health():
        """Health check endpoint"""
        return jsonify({'status': 'ok', 'message': 'Restaurant ordering service is running!'})

    return app


if __name__ == '__main__':
    config.configure_logging()
    app = create_app()

    print("=== Restaurant Ordering Server ===")
    print(f"Starting server on http://localhost:{config.PORT}")
    print("Press Ctrl+C to stop")

    app.run(
        host='0.0.0.0',
        port=config.PORT,
        debug=config.DEBUG
    )
