"""
Main entry point for the restaurant ordering console
"""
import config
from core.ordering_system import OrderingSystem
from ui.simple_ui import SimpleOrderUI
from ui.kitchen_ui import KitchenUI, AdminUI


def main():
    # Pick a screen; all screens share one in-memory system
    config.configure_logging()

    with OrderingSystem() as system:
        while True:
            print("\n=== Restaurant Ordering System ===")
            print("1. Customer kiosk")
            print("2. Kitchen display")
            print("3. Admin dashboard")
            print("4. Exit")
            choice = input("\nSelect (1-4): ").strip()

            if choice == "1":
                SimpleOrderUI(system).run()
            elif choice == "2":
                KitchenUI(system).run()
            elif choice == "3":
                AdminUI(system).run()
            elif choice == "4":
                print("Goodbye.")
                break
            else:
                print("Invalid choice. Please enter 1-4.")


if __name__ == "__main__":
    main()
