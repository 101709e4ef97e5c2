import pytest

from textot.models import TextEdit


@pytest.fixture
def hello_edit():
    """Replaces 'world' with 'there' in 'hello world'."""
    return TextEdit().retain(6).delete(5).insert("there")


@pytest.fixture
def lorem_edit():
    """Base length 9, target length 12."""
    return TextEdit().retain(5).insert("lorem").retain(2).delete(2)
