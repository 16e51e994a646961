"""Sectioned model input file.

The input file is organised in ``[SECTION]`` blocks of ``KEY = VALUE`` lines.
Keys keep their case and may contain spaces (``EROSION START 1``). Lines
starting with a comment prefix are ignored.

Example::

    [SEDOPTIONS]
    MASS WASTING    = FALSE
    SURFACE EROSION = TRUE

    [SEDTIME]
    TIME STEPS      = 1
    EROSION START 1 = 01/01/2000-00
    EROSION END 1   = 01/10/2000-00
"""

import configparser
import logging
from pathlib import Path
from typing import Optional, Union

from sedinit.contracts.failure import MissingOrMalformedValue
from sedinit.keys import InputKey

logger = logging.getLogger(__name__)


class InputStore:
    """(section, key) -> string lookup with defaults.

    Parameters
    ----------
    sections : dict
        ``{section: {key: value}}`` mapping. Values are stored as strings.
    buffer_size : int
        Maximum number of characters returned for a value. Longer values are
        truncated.
    """

    def __init__(self, sections: Optional[dict] = None, buffer_size: int = 255):
        self.buffer_size = buffer_size
        self._sections = {}
        for section, entries in (sections or {}).items():
            self._sections[section] = {
                str(key).strip(): str(value).strip() for key, value in entries.items()
            }

    @classmethod
    def from_string(cls, text: str, buffer_size: int = 255,
                    comment_prefixes: tuple = ("#",)) -> "InputStore":
        parser = configparser.ConfigParser(
            delimiters=("=",),
            comment_prefixes=comment_prefixes,
            inline_comment_prefixes=None,
            interpolation=None,
            strict=False,
        )
        parser.optionxform = str
        try:
            parser.read_string(text)
        except configparser.MissingSectionHeaderError as e:
            raise MissingOrMalformedValue(
                f"line {e.lineno}", f"entry before the first [SECTION] header: {e.line.strip()!r}"
            ) from e
        except configparser.ParsingError as e:
            lineno, line = e.errors[0]
            raise MissingOrMalformedValue(
                f"line {lineno}", f"expected KEY = VALUE, got {line}"
            ) from e
        except configparser.Error as e:
            raise MissingOrMalformedValue("input file", str(e)) from e
        sections = {name: dict(parser.items(name)) for name in parser.sections()}
        return cls(sections, buffer_size=buffer_size)

    @classmethod
    def from_file(cls, path: Union[str, Path], buffer_size: int = 255,
                  comment_prefixes: tuple = ("#",)) -> "InputStore":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")
        store = cls.from_string(path.read_text(), buffer_size, comment_prefixes)
        logger.info("Input file loaded: %s (%d sections)", path, len(store.sections()))
        return store

    def sections(self) -> list[str]:
        return list(self._sections)

    def has(self, section: str, key: str) -> bool:
        return key in self._sections.get(section, {})

    def get(self, section: str, key: str, default: Optional[str] = None) -> str:
        """Return the value for (section, key).

        Raises
        ------
        MissingOrMalformedValue
            If the key is absent and no default was given.
        """
        value = self._sections.get(section, {}).get(key)
        if value is None:
            if default is None:
                raise MissingOrMalformedValue(key, f"no entry in [{section}]")
            value = default
        return value[:self.buffer_size]

    def lookup(self, entry: InputKey, default: Optional[str] = None) -> str:
        return self.get(entry.section, entry.key, default)
