"""Use case for producing the home page document."""

from greeting_app.domain.entities.greeting import GreetingDocument


DEFAULT_MESSAGE = "Hello World!"
DEFAULT_PEOPLE = ("Harry", "Jack", "Mary")


def get_home() -> GreetingDocument:
    """Return the greeting document shown on the home page.

    A new instance is built on every call; nothing is stored between requests.
    """

    return GreetingDocument(message=DEFAULT_MESSAGE, people=DEFAULT_PEOPLE)
