"""A small command-line parser for options that take a fixed number of arguments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ArgumentDescription:
    """An option name, without its leading '-', and how many arguments follow it."""

    option: str
    count: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"argument count must not be negative: {self.count}")


class NotInitializedError(RuntimeError):
    """Raised when a parser is queried before a successful :meth:`ArgumentParser.initialize`."""


@dataclass
class _ParsedOption:
    name: str
    expected: int
    arguments: list[str] = field(default_factory=list)


class ArgumentParser:
    """Split a command line into described options and plain input arguments.

    An element starting with '-' names an option; it is followed by exactly as
    many arguments as its description says.  Every other element is an input.
    Options not described are skipped when ``ignore_unknown`` is true and make
    parsing fail otherwise.
    """

    def __init__(self, ignore_unknown: bool = True) -> None:
        self._ignore_unknown = ignore_unknown
        self._options: list[_ParsedOption] = []
        self._inputs: list[str] = []
        self._initialized = False

    def _clear(self) -> None:
        self._options = []
        self._inputs = []
        self._initialized = False

    def initialize(
        self, argv: Sequence[str], descriptions: Iterable[ArgumentDescription]
    ) -> bool:
        """Parse ``argv`` (without the program name) against ``descriptions``.

        Returns whether the command line is valid.  A parser that is already
        initialized is left as it is and reports success; call :meth:`finalize`
        first to parse again.
        """
        if self._initialized:
            return True
        self._clear()

        table: dict[str, ArgumentDescription] = {}
        for description in descriptions:
            table.setdefault(description.option, description)

        pending: _ParsedOption | None = None
        valid = True
        for arg in argv:
            if arg.startswith("-"):
                if pending is not None:
                    valid = False
                    break
                description = table.get(arg[1:])
                if description is None:
                    if not self._ignore_unknown:
                        return False
                    continue
                parsed = _ParsedOption(description.option, description.count)
                self._options.append(parsed)
                if description.count > 0:
                    pending = parsed
            elif pending is None:
                self._inputs.append(arg)
            else:
                pending.arguments.append(arg)
                if len(pending.arguments) == pending.expected:
                    pending = None

        if pending is not None:
            valid = False

        self._initialized = valid
        return valid

    def finalize(self) -> None:
        """Forget everything parsed so that :meth:`initialize` can run again."""
        self._clear()

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise NotInitializedError("the parser has not been initialized")

    def _find(self, option: str) -> _ParsedOption | None:
        return next((p for p in self._options if p.name == option), None)

    def is_enabled(self, option: str) -> bool:
        """Whether ``option`` appeared on the command line."""
        self._require_initialized()
        return self._find(option) is not None

    def get_option(self, option: str, index: int = 0) -> str:
        """The ``index``-th argument of the first occurrence of ``option``, or ''."""
        self._require_initialized()
        parsed = self._find(option)
        if parsed is None or not 0 <= index < len(parsed.arguments):
            return ""
        return parsed.arguments[index]

    def get_argument(self, index: int = 0) -> str:
        """The ``index``-th input argument, or '' if there is none."""
        self._require_initialized()
        if not 0 <= index < len(self._inputs):
            return ""
        return self._inputs[index]

    def argument_count(self) -> int:
        """Number of input arguments."""
        self._require_initialized()
        return len(self._inputs)

    def option_count(self) -> int:
        """Number of described options found, repeats included."""
        self._require_initialized()
        return len(self._options)

    def is_initialized(self) -> bool:
        return self._initialized