import logging

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str

    def greeting(self) -> str:
        return f"Hello, {self.name}"

    def say_hello(self) -> None:
        """Print the greeting line to stdout."""
        logger.debug("greeting user %r", self.name)
        print(self.greeting())


class Greeter:
    def greet(self, name: str) -> None:
        print(f"Hello, {name}!")
