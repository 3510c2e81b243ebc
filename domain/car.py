# domain/car.py
from datetime import datetime

import numpy as np

from .object_pool import PooledObjectMixin


# --- Helper for colored output ---
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"


class Car(PooledObjectMixin):
    """A rental car. The fleet pool recycles the same car between customers."""

    def __init__(self):
        super().__init__()  # Initialize the PooledObjectMixin
        self.name = f"car_{self.resource_id}"
        self.position = np.zeros(2)
        self.odometer = 0.0
        self.rented_at = datetime.now()

    def reset(self):
        """Stamps a new rental. Position and odometer stay with the car."""
        # Note: self.resource_id and self.pool are NOT reset.
        self.rented_at = datetime.now()

    def move(self, dx=1.0, dy=0.0) -> str:
        step = np.array([float(dx), float(dy)])
        self.position = self.position + step
        self.odometer += float(np.linalg.norm(step))
        return f"car is moving to {self.position.round(1)}"

    def __str__(self):
        return f"{self.name} at {self.position.round(1)}"
