"""
Text-based kitchen display and admin dashboard
"""
from core.ordering_system import OrderingSystem
from services.order_service import KITCHEN_ACTIONS


class KitchenUI:
    """Kitchen board: move orders along with accept / ready / serve / cancel"""

    COLUMNS = (("new", "New Orders"), ("in_progress", "In Progress"), ("ready", "Ready"))

    def __init__(self, system: OrderingSystem):
        self.system = system

    def run(self):
        print("Kitchen display. Commands: board, <action> <order_id>, quit")
        print(f"Actions: {', '.join(KITCHEN_ACTIONS)}")

        while True:
            user_input = input("\nkitchen> ").strip()
            if not user_input or user_input == "board":
                self.show_board()
                continue
            if user_input in ["quit", "exit"]:
                break

            action, _, order_id = user_input.partition(" ")
            if not order_id:
                print("Usage: <action> <order_id>")
                continue
            result = self.system.apply_kitchen_action(order_id.strip(), action)
            print(result["message"] if result["success"] else f"Rejected: {result['error']}")

    def show_board(self):
        board = self.system.get_kitchen_board()
        for key, title in self.COLUMNS:
            orders = board["columns"][key]
            print(f"\n[{title}] ({len(orders)})")
            for order in orders:
                table = f"table {order['table_number']}" if order["table_number"] else "takeaway"
                items = ", ".join(
                    f"{line['quantity']}x {line['menu_item']['name']}" for line in order["lines"]
                )
                flag = " URGENT" if order["urgent"] else ""
                print(f"- {order['id']}{flag} ({table}, {order['elapsed_minutes']} min): {items}")


class AdminUI:
    """Read-only dashboard"""

    def __init__(self, system: OrderingSystem):
        self.system = system

    def run(self):
        dashboard = self.system.get_dashboard()
        stats = dashboard["stats"]

        print("\n=== Dashboard ===")
        print(f"Total Orders Today: {stats['total_orders_today']}")
        print(f"Revenue Today:      ${stats['total_revenue_today']:.2f}")
        print(f"Active Orders:      {stats['active_order_count']}")
        print(f"Avg Prep Time:      {stats['avg_prep_time_minutes']} min")

        print("\nRecent orders:")
        for order in dashboard["recent_orders"]:
            print(f"- {order['id']}: {order['status']} ${order['total_amount']:.2f}")
