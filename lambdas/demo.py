"""
Each lambda corresponds to a callable type, named in `lambdas.interfaces`.
A capability contract has exactly one operation: calling it.
"""

import logging

from .collection import init_collection
from .config import LOGGER_NAME, DemoConfig
from .converters import compare, parse_int, sort_strings
from .interfaces import Comparator, Converter, PersonFactory
from .models import Person, Word
from .utils.param_utils import UNSET, Unsettable, is_set

logger = logging.getLogger(f"{LOGGER_NAME}.demo")


class Lambdas:
    __slots__ = ("_config",)

    def __init__(self, config: Unsettable[DemoConfig] = UNSET):
        self._config = config if is_set(config) else DemoConfig()

    @property
    def config(self) -> DemoConfig:
        return self._config

    def run(self) -> None:
        self.basic_lambda()
        self.functional_interface()
        self.method_reference()
        self.constructor_reference()

    def basic_lambda(self) -> tuple[list[str], list[str], list[str]]:
        items = list(self._config.unsorted)

        # a full function definition
        def by_name(a: str, b: str) -> int:
            return compare(a, b)

        # inline, no annotations
        inline: Comparator[str] = lambda a, b: (a > b) - (a < b)

        results = (
            sort_strings(items, by_name),
            sort_strings(items, inline),
            # an existing function referenced by name
            sort_strings(items, compare),
        )
        for result in results:
            logger.debug("Sorted to %s", result)
        return results

    def functional_interface(self) -> int:
        converter: Converter[str, int] = lambda text: parse_int(text)
        converted = converter(self._config.number_text)
        logger.debug("Converted to %s", converted)
        return converted

    def method_reference(self) -> tuple[int, str]:
        """
        Method references let an existing function be passed by name
        instead of wrapping it in a lambda.
        """
        int_converter: Converter[str, int] = parse_int
        converted = int_converter(self._config.number_text)
        logger.debug("Converted to %s", converted)

        word = Word(self._config.word)
        first_letter: Converter[Word, str] = Word.first_letter
        letter = first_letter(word)
        logger.debug("First letter is %s", letter)
        return converted, letter

    def constructor_reference(self) -> tuple[Person, set[str]]:
        """
        `Person` equals `lambda first, last: Person(first, last)`,
        and `set` equals `lambda: set()`.
        """
        person_factory: PersonFactory[Person] = Person
        person = person_factory(self._config.first_name, self._config.last_name)
        logger.debug("Person has name %s %s", person.first_name, person.last_name)

        filled_collection: set[str] = init_collection(set, *self._config.elements)
        for element in filled_collection:
            logger.debug("Collection element is %s", element)
        return person, filled_collection
