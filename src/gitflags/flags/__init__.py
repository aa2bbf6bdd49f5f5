import importlib
import pkgutil
import sys

from pydantic import BaseModel

from ..wrappers import GitWrapper

FLAGS = {}


class FlagDefinition(BaseModel, frozen=True, extra="forbid"):
    name: str
    requires_argument: bool
    arguments: tuple[str, ...] = ()
    usage: str
    wrapper: type[GitWrapper]

    def build(self, *values: str) -> GitWrapper:
        return self.wrapper.build(*values, usage=self.usage)


def make_usage(name, arguments, example=None):
    if not arguments:
        return name
    usage = name + "=" + " ".join(f"<{argument}>" for argument in arguments)
    if example:
        usage += f" \n eg. {example}"
    return usage


def register(name, arguments=(), example=None, requires_argument=True):
    def decorator(cls):
        FLAGS[name] = FlagDefinition(
            name=name,
            requires_argument=requires_argument,
            arguments=tuple(arguments),
            usage=make_usage(name, arguments, example),
            wrapper=cls,
        )
        return cls
    return decorator

def _load_all_flags():
    package = sys.modules[__name__]
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{__name__}.{module_name}")

_load_all_flags()
