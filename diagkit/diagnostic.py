"""The ``diagnostic`` class decorator and the definitions it builds."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable

from diagkit.code import Code
from diagkit.diagnostic_arg import DiagnosticArg, parse_diagnostic_args
from diagkit.diagnostic_source import DiagnosticSource
from diagkit.forward import Forward, WhichFn
from diagkit.help import Help
from diagkit.label import Labels
from diagkit.related import Related
from diagkit.severity import Severity
from diagkit.source_code import SourceCode
from diagkit.url import Url

_OPTIONS_ATTR = "_diagnostic_option_sets"
_ROOT_ATTR = "_diagnostic_root"
_DEFINITION_ATTR = "_diagnostic_definition"

# Decorator option kind -> attribute of DiagnosticConcreteArgs it sets.
_ARG_ATTRS = {
    "forward": "forward",
    "code": "code",
    "severity": "severity",
    "help": "help",
    "url": "url",
}


class DiagnosticDefinitionError(ValueError):
    """A class was decorated with options that do not make a diagnostic."""

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = tuple(errors)
        super().__init__("; ".join(self.errors))


@dataclass
class DiagnosticConcreteArgs:
    """Everything a non-transparent diagnostic definition specifies."""

    code: Code | None = None
    severity: Severity | None = None
    help: Help | None = None
    labels: Labels | None = None
    source_code: SourceCode | None = None
    url: Url | None = None
    forward: Forward | None = None
    related: Related | None = None
    diagnostic_source: DiagnosticSource | None = None

    @classmethod
    def for_fields(cls, fields: Iterable[dataclasses.Field]) -> DiagnosticConcreteArgs:
        """Read the roles that fields play: labels, source code, help and so on."""
        fields = list(fields)
        try:
            return cls(
                labels=Labels.from_fields(fields),
                source_code=SourceCode.from_fields(fields),
                related=Related.from_fields(fields),
                help=Help.from_fields(fields),
                diagnostic_source=DiagnosticSource.from_fields(fields),
            )
        except ValueError as error:
            raise DiagnosticDefinitionError([str(error)]) from error

    def add_args(self, args: Iterable[DiagnosticArg]) -> list[str]:
        """Apply decorator options; return the problems found, in order.

        A repeated option is reported, and the later value still wins.
        """
        errors: list[str] = []
        for arg in args:
            if arg.is_transparent:
                errors.append("transparent not allowed")
                continue
            attr = _ARG_ATTRS[arg.kind]
            if getattr(self, attr) is not None:
                errors.append(f"{arg.kind} has already been specified")
            setattr(self, attr, arg.value)
        return errors


@dataclass(frozen=True)
class DiagnosticDefArgs:
    """A diagnostic definition: either transparent (a forward) or concrete."""

    forward: Forward | None = None
    concrete: DiagnosticConcreteArgs | None = None

    @property
    def is_transparent(self) -> bool:
        return self.concrete is None

    @classmethod
    def parse(
        cls,
        fields: Iterable[dataclasses.Field],
        option_sets: Sequence[Mapping[str, Any] | Iterable[tuple[str, Any]]],
        allow_transparent: bool,
    ) -> DiagnosticDefArgs:
        """Build a definition from the fields and the option sets given to it."""
        fields = list(fields)
        option_sets = list(option_sets)

        if allow_transparent and len(option_sets) == 1:
            try:
                args = parse_diagnostic_args(option_sets[0])
            except ValueError:
                args = []
            if args and args[0].is_transparent:
                try:
                    forward = Forward.for_transparent_field(fields)
                except ValueError as error:
                    raise DiagnosticDefinitionError([str(error)]) from error
                return cls(forward=forward)

        transparent_error = (
            "transparent not allowed in combination with other args"
            if allow_transparent
            else "transparent not allowed here"
        )

        errors: list[str] = []
        concrete = DiagnosticConcreteArgs.for_fields(fields)
        for options in option_sets:
            try:
                args = parse_diagnostic_args(options)
            except ValueError as error:
                errors.append(str(error))
                continue
            if any(arg.is_transparent for arg in args):
                errors.append(transparent_error)
            errors.extend(
                concrete.add_args(arg for arg in args if not arg.is_transparent)
            )

        if errors:
            raise DiagnosticDefinitionError(errors)
        return cls(concrete=concrete)

    def _invoke(
        self,
        obj: Any,
        which_fn: WhichFn,
        pick: Callable[[DiagnosticConcreteArgs], Any],
        produce: Callable[[Any, Any], Any],
    ) -> Any:
        """Answer one diagnostic method for *obj*, forwarding where specified."""
        if self.concrete is None:
            return self.forward.call(obj, which_fn)
        spec = pick(self.concrete)
        if spec is not None:
            return produce(spec, obj)
        if self.concrete.forward is not None:
            return self.concrete.forward.call(obj, which_fn)
        return None


def _producers(
    type_name: str, variant: str | None
) -> dict[WhichFn, tuple[Callable[[DiagnosticConcreteArgs], Any], Callable[[Any, Any], Any]]]:
    return {
        WhichFn.CODE: (lambda c: c.code, lambda spec, obj: str(spec)),
        WhichFn.HELP: (lambda c: c.help, lambda spec, obj: spec.render(obj)),
        WhichFn.SEVERITY: (lambda c: c.severity, lambda spec, obj: spec),
        WhichFn.RELATED: (lambda c: c.related, lambda spec, obj: spec.collect(obj)),
        WhichFn.URL: (
            lambda c: c.url,
            lambda spec, obj: spec.render(obj, type_name, variant),
        ),
        WhichFn.LABELS: (lambda c: c.labels, lambda spec, obj: spec.collect(obj)),
        WhichFn.SOURCE_CODE: (lambda c: c.source_code, lambda spec, obj: spec.get(obj)),
        WhichFn.DIAGNOSTIC_SOURCE: (
            lambda c: c.diagnostic_source,
            lambda spec, obj: spec.get(obj),
        ),
    }


def _make_method(
    definition: DiagnosticDefArgs,
    which_fn: WhichFn,
    pick: Callable[[DiagnosticConcreteArgs], Any],
    produce: Callable[[Any, Any], Any],
) -> Callable[[Any], Any]:
    def method(self: Any) -> Any:
        return definition._invoke(self, which_fn, pick, produce)

    method.__name__ = which_fn.value
    method.__doc__ = f"The {which_fn.value.replace('_', ' ')} of this diagnostic."
    return method


def _derive(cls: type, options: Mapping[str, Any]) -> type:
    own = (dict(options),) if options else ()
    inherited = getattr(cls, _OPTIONS_ATTR, None)
    if inherited is None:
        option_sets = own
        root = cls
        variant = None
    else:
        option_sets = tuple(inherited) + own
        root = getattr(cls, _ROOT_ATTR, cls)
        variant = cls.__name__

    fields = dataclasses.fields(cls) if dataclasses.is_dataclass(cls) else ()
    definition = DiagnosticDefArgs.parse(fields, option_sets, True)

    for which_fn, (pick, produce) in _producers(root.__name__, variant).items():
        method = _make_method(definition, which_fn, pick, produce)
        method.__qualname__ = f"{cls.__qualname__}.{which_fn.value}"
        setattr(cls, which_fn.value, method)

    setattr(cls, _OPTIONS_ATTR, option_sets)
    setattr(cls, _ROOT_ATTR, root)
    setattr(cls, _DEFINITION_ATTR, definition)
    return cls


def diagnostic(cls: type | None = None, **kwargs: Any) -> Any:
    """Give a (data)class the diagnostic methods described by *kwargs*.

    Options are ``code``, ``severity``, ``help``, ``url``, ``forward`` and
    ``transparent``. Fields declared with ``diagnostic_field`` supply labels,
    help, related diagnostics, source code and the diagnostic source.
    A decorated subclass of a decorated class acts as a variant: it takes
    the parent's options as well as its own.
    """
    if cls is None:
        return lambda target: _derive(target, kwargs)
    return _derive(cls, kwargs)