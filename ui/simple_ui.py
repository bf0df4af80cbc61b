"""
Simple text-based customer kiosk
"""
from typing import Dict, Any

from core.ordering_system import OrderingSystem


class SimpleOrderUI:
    """Simple text-based order interface"""

    HELP = (
        "Commands: menu [category], add <item_id> [qty], remove <item_id>, "
        "qty <item_id> <n>, note <item_id> <text>, cart, clear, order, track, quit"
    )

    def __init__(self, system: OrderingSystem, session_id: str = "customer_session"):
        self.system = system
        self.session_id = session_id

    def run(self):
        """Run the kiosk loop until the customer quits"""
        print("Welcome! Browse the menu and build your order.")
        print(self.HELP)

        while True:
            user_input = input("\n> ").strip()
            if not user_input:
                continue

            command, _, rest = user_input.partition(" ")
            command = command.lower()
            args = rest.split()

            if command in ["quit", "exit"]:
                self.system.end_session(self.session_id)
                print("Thank you for dining with us!")
                break
            elif command == "menu":
                self._show_menu(args[0] if args else None)
            elif command == "add" and args:
                quantity = self._parse_int(args[1]) if len(args) > 1 else 1
                if quantity is not None:
                    self._show_result(self.system.add_to_cart(self.session_id, args[0], quantity))
            elif command == "remove" and args:
                self._show_result(self.system.remove_from_cart(self.session_id, args[0]))
            elif command == "qty" and len(args) == 2:
                quantity = self._parse_int(args[1])
                if quantity is not None:
                    self._show_result(self.system.update_quantity(self.session_id, args[0], quantity))
            elif command == "note" and args:
                text = rest.split(" ", 1)[1] if len(args) > 1 else None
                self._show_result(self.system.update_instructions(self.session_id, args[0], text))
            elif command == "cart":
                self._show_cart()
            elif command == "clear":
                self._show_result(self.system.clear_cart(self.session_id))
            elif command == "order":
                self._process_order()
            elif command == "track":
                self._show_tracking()
            else:
                print(self.HELP)

    def _show_menu(self, category=None):
        result = self.system.list_menu(category)
        if not result["items"]:
            print(f"No items in '{category}'. Categories: {', '.join(result['categories'])}")
            return
        for item in result["items"]:
            flags = " (V)" if item["is_veg"] else ""
            if not item["is_available"]:
                flags += " [sold out]"
            print(f"- {item['id']:<10} {item['name']}{flags}: ${item['price']:.2f}")

    def _show_cart(self):
        """Show cart contents"""
        cart = self.system.get_cart_details(self.session_id)
        print(cart["message"])
        if cart["cart_items"]:
            for line in cart["cart_items"]:
                note = f" ({line['special_instructions']})" if line["special_instructions"] else ""
                print(f"- {line['menu_item']['name']} x{line['quantity']}{note}: ${line['line_total']:.2f}")
            summary = cart["summary"]
            print(f"Subtotal: ${summary['subtotal']:.2f}  Tax: ${summary['tax']:.2f}  "
                  f"Total: ${summary['grand_total']:.2f}")

    def _process_order(self):
        """Process final order"""
        table_number = input("Table number (optional): ").strip()
        customer_name = input("Your name (optional): ").strip()
        print("Placing your order...")

        result = self.system.place_order(self.session_id, table_number, customer_name)
        if result["success"]:
            print(result["message"])
            print(f"Estimated time: ~{result['estimated_time']} min")
        else:
            print(f"Order failed: {result['error']}")

    def _show_tracking(self):
        result = self.system.track_order(session_id=self.session_id)
        if not result["success"]:
            print("You have not placed an order yet.")
            return

        order = result["order"]
        print(f"Order {order['id']} - {order['status']}")
        for index, step in enumerate(result["steps"]):
            marker = "x" if index <= result["current_step"] else " "
            print(f"  [{marker}] {step['label']}: {step['description']}")
        if result["estimated_time"]:
            print(f"  ~{result['estimated_time']} min")

    @staticmethod
    def _parse_int(value: str):
        try:
            return int(value)
        except ValueError:
            print(f"'{value}' is not a number.")
            return None

    @staticmethod
    def _show_result(result: Dict[str, Any]):
        if result["success"]:
            print(result.get("message", "Done."))
        else:
            print(f"Sorry: {result['error']}")
