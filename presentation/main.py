# presentation/main.py

from application.rental_service import RentalService
from application.config import config
from presentation.renderer import display

QUIT_COMMANDS = {"q", "quit", "exit"}


def run(read_command=input):
    """Initializes the rental desk and runs the command loop until the user quits."""
    rental_service = RentalService()
    rental_service.initialize_fleet()

    log_lines = config.get("display", "log_lines", default=10)

    try:
        while True:
            display(rental_service.get_render_data(), log_lines)
            command_text = read_command("> ")
            if command_text.strip().lower() in QUIT_COMMANDS:
                break
            rental_service.execute_user_command(command_text)
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted by user. Exiting.")
    return rental_service
