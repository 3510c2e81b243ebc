# application/rental_service.py
from domain.car import Car, Colors
from domain.object_pool import PoolError, ResourcePool
from .config import config

HELP_TEXT = "Commands: rent [n], free <id>, move <id> <dx> <dy>, report, help, q"


class RentalService:
    def __init__(self):
        strict = bool(config.get("pool", "strict_release", default=False))
        self.pool = ResourcePool(factory=Car, strict=strict)
        self.log_messages = []
        self._max_log_messages = config.get(
            "logging", "max_log_messages", default=99
        )

    def initialize_fleet(self):
        """Add welcome messages and pre-rent the configured number of cars."""
        self.add_log("Welcome to the car rental desk!")
        self.add_log(HELP_TEXT)
        for _ in range(config.get("pool", "initial_rentals", default=0)):
            self.rent_car()

    def add_log(self, message):
        self.log_messages.append(message)
        if len(self.log_messages) > self._max_log_messages:
            self.log_messages.pop(0)

    def rent_car(self) -> Car:
        created_before = self.pool.report()
        car = self.pool.acquire()
        origin = "new" if self.pool.report() > created_before else "recycled"
        self.add_log(
            f"{Colors.GREEN}Rented {car.name} ({origin}) at "
            f"{car.rented_at:%H:%M:%S}.{Colors.RESET}"
        )
        return car

    def free_car(self, car_id: int) -> bool:
        car = self.pool.find_busy(car_id)
        if car is None:
            if self.pool.strict:
                raise PoolError(f"Car {car_id} is not rented.")
            self.add_log(f"{Colors.YELLOW}Car {car_id} is not rented.{Colors.RESET}")
            return False
        self.pool.release(car)
        self.add_log(f"Returned {car.name} after {car.odometer:.1f} m.")
        return True

    def move_car(self, car_id: int, dx: float, dy: float) -> str:
        car = self.pool.find_busy(car_id)
        if car is None:
            raise ValueError(f"Car {car_id} is not rented.")
        message = car.move(dx, dy)
        self.add_log(f"{car.name}: {message}")
        return message

    def execute_user_command(self, command_text: str):
        """Parses and executes commands, handling domain exceptions."""
        parts = command_text.strip().split()
        if not parts:
            return

        command = parts[0].lower()

        try:
            if command == "rent" and len(parts) <= 2:
                count = int(parts[1]) if len(parts) == 2 else 1
                if count < 1:
                    raise ValueError("Can only rent a positive number of cars.")
                for _ in range(count):
                    self.rent_car()
            elif command == "free" and len(parts) == 2:
                self.free_car(int(parts[1]))
            elif command == "move" and len(parts) == 4:
                self.move_car(int(parts[1]), float(parts[2]), float(parts[3]))
            elif command == "report":
                self.add_log(
                    f"{Colors.BLUE}Fleet: {self.pool.report()} cars, "
                    f"{self.pool.free_count()} free, "
                    f"{self.pool.busy_count()} rented.{Colors.RESET}"
                )
            elif command == "help":
                self.add_log(HELP_TEXT)
            else:
                self.add_log(
                    f"{Colors.RED}Unknown command: '{command_text}'{Colors.RESET}"
                )
        except ValueError as e:
            # PoolError is a ValueError, so strict-mode rejections land here too.
            self.add_log(f"{Colors.RED}Command failed: {e}{Colors.RESET}")

    def get_render_data(self) -> dict:
        """
        Provides all necessary data for the Presentation Layer to draw the fleet.
        """
        car_statuses = [
            f"{Colors.CYAN}{car.name:<10s}{Colors.RESET}"
            f" since {car.rented_at:%H:%M:%S}"
            f" | pos {car.position.round(1)} | odo {car.odometer:>7.1f} m"
            for car in self.pool.busy_resources()
        ]
        return {
            "total": self.pool.report(),
            "free": self.pool.free_count(),
            "busy": self.pool.busy_count(),
            "car_statuses": car_statuses,
            "logs": self.log_messages,
            "colors": Colors,
        }
