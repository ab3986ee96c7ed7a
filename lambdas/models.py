from dataclasses import dataclass


@dataclass(frozen=True)
class Word:
    value: str

    def first_letter(self) -> str:
        """
        The first character of the word, an empty word gives an empty string.

        `Word.first_letter` is itself a `Converter[Word, str]`.
        """
        return self.value[:1]


@dataclass(frozen=True)
class Person:
    """
    An immutable person record.

    The class is a `PersonFactory[Person]`,
    so the constructor can be passed around wherever a factory is expected:

    ```py
    factory: PersonFactory[Person] = Person
    person = factory("Firstname", "Lastname")
    ```
    """

    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
