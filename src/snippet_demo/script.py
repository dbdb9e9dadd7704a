"""
script.py – the sample program: greet a user, then print 5!.
"""

from typing import Optional

from .config import Settings, load_settings
from .factorial import factorial
from .models.schemas import User


def main(settings: Optional[Settings] = None) -> None:
    settings = settings or load_settings()

    user = User(name=settings.user_name)
    user.say_hello()
    print(factorial(settings.factorial_n, limit=settings.max_factorial))


if __name__ == "__main__":
    main()
