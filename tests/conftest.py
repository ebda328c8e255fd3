import pytest


class ScriptedRandom:
    """Hands out a fixed sequence of faces, checking each one fits the die."""

    def __init__(self, faces):
        self.faces = list(faces)
        self.calls = []

    def randint(self, a, b):
        assert self.faces, f"ran out of scripted faces (asked for 1..{b})"
        face = self.faces.pop(0)
        assert a == 1 and 1 <= face <= b, f"scripted face {face} does not fit 1..{b}"
        self.calls.append(b)
        return face


@pytest.fixture
def scripted():
    return ScriptedRandom
