# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""A module controlling settings for qcheck to use when checking properties.

Either an explicit settings object can be passed to the runners or the
default object on this module can be changed by loading a profile.
"""

import contextlib
import datetime
from enum import IntEnum, unique
from typing import Any, Dict

import attr

from qcheck.errors import InvalidArgument, InvalidState
from qcheck.internal.validation import check_type
from qcheck.utils.conventions import not_set
from qcheck.utils.dynamicvariables import DynamicVariable

__all__ = ["settings"]

all_settings = {}  # type: Dict[str, Setting]


class settingsProperty:
    def __init__(self, name, show_default):
        self.name = name
        self.show_default = show_default

    def __get__(self, obj, type=None):
        if obj is None:
            return self
        else:
            try:
                return obj.__dict__[self.name]
            except KeyError:
                raise AttributeError(self.name) from None

    def __set__(self, obj, value):
        obj.__dict__[self.name] = value

    def __delete__(self, obj):
        raise AttributeError("Cannot delete attribute %s" % (self.name,))

    @property
    def __doc__(self):
        description = all_settings[self.name].description
        default = (
            repr(getattr(settings.default, self.name))
            if self.show_default
            else "(dynamically calculated)"
        )
        return "%s\n\ndefault value: ``%s``" % (description, default)


default_variable = DynamicVariable(None)


class settingsMeta(type):
    @property
    def default(self):
        v = default_variable.value
        if v is not None:
            return v
        if hasattr(settings, "_current_profile"):
            settings.load_profile(settings._current_profile)
            assert default_variable.value is not None
        return default_variable.value

    def _assign_default_internal(self, value):
        default_variable.value = value

    def __setattr__(self, name, value):
        if name == "default":
            raise AttributeError(
                "Cannot assign to the property settings.default - "
                "consider using settings.load_profile instead."
            )
        elif not (isinstance(value, settingsProperty) or name.startswith("_")):
            raise AttributeError(
                "Cannot assign qcheck.settings.%s=%r - the settings "
                "class is immutable.  You can change the global default "
                "settings with settings.load_profile, or pass settings=... "
                "to quick_check instead." % (name, value)
            )
        return type.__setattr__(self, name, value)


class settings(metaclass=settingsMeta):
    """A settings object controls how many trials a property check runs, how
    large the generated inputs may grow, how long shrinking may take and how
    much is reported.

    Default values are picked up from the settings.default object and
    changes made there will be picked up in newly created settings.
    """

    _WHITELISTED_REAL_PROPERTIES = ["_construction_complete"]
    __definitions_are_locked = False
    _profiles = {}  # type: dict
    __module__ = "qcheck"

    def __getattr__(self, name):
        if name in all_settings:
            return all_settings[name].default
        else:
            raise AttributeError("settings has no attribute %s" % (name,))

    def __init__(self, parent: "settings" = None, **kwargs: Any) -> None:
        if parent is not None and not isinstance(parent, settings):
            raise InvalidArgument(
                "Invalid argument: parent=%r is not a settings instance" % (parent,)
            )
        self._construction_complete = False
        defaults = parent or settings.default
        for name in kwargs:
            if name not in all_settings:
                raise InvalidArgument(
                    "Invalid argument: %r is not a valid setting" % (name,)
                )
        for setting in all_settings.values():
            if kwargs.get(setting.name, not_set) is not_set:
                if defaults is not None:
                    kwargs[setting.name] = getattr(defaults, setting.name)
                else:
                    kwargs[setting.name] = setting.default
            elif setting.validator:
                kwargs[setting.name] = setting.validator(kwargs[setting.name])
        for name, value in kwargs.items():
            setattr(self, name, value)
        self._construction_complete = True

    @classmethod
    def _define_setting(
        cls,
        name,
        description,
        default,
        options=None,
        validator=None,
        show_default=True,
    ):
        """Add a new setting.

        - name is the name of the property that will be used to access the
          setting. This must be a valid python identifier.
        - description will appear in the property's docstring
        - default is the default value.
        """
        if settings.__definitions_are_locked:
            raise InvalidState(
                "settings have been locked and may no longer be defined."
            )
        if options is not None:
            options = tuple(options)
            assert default in options
        else:
            assert validator is not None

        all_settings[name] = Setting(
            name=name,
            description=description.strip(),
            default=default,
            options=options,
            validator=validator,
        )
        setattr(settings, name, settingsProperty(name, show_default))

    @classmethod
    def lock_further_definitions(cls):
        settings.__definitions_are_locked = True

    def __setattr__(self, name, value):
        if name in settings._WHITELISTED_REAL_PROPERTIES:
            return object.__setattr__(self, name, value)
        elif name in all_settings:
            if self._construction_complete:
                raise AttributeError(
                    "settings objects are immutable and may not be assigned to"
                    " after construction."
                )
            else:
                setting = all_settings[name]
                if setting.options is not None and value not in setting.options:
                    raise InvalidArgument(
                        "Invalid %s, %r. Valid options: %r"
                        % (name, value, setting.options)
                    )
                return object.__setattr__(self, name, value)
        else:
            raise AttributeError("No such setting %s" % (name,))

    def __repr__(self):
        bits = ("%s=%r" % (name, getattr(self, name)) for name in all_settings)
        return "settings(%s)" % ", ".join(sorted(bits))

    def show_changed(self):
        bits = []
        for name, setting in all_settings.items():
            value = getattr(self, name)
            if value != setting.default:
                bits.append("%s=%r" % (name, value))
        return ", ".join(sorted(bits, key=len))

    @property
    def effective_max_discarded(self):
        """The discard budget, which defaults to five discards for every
        required success."""
        if self.max_discarded is None:
            return self.max_success * 5
        return self.max_discarded

    @staticmethod
    def register_profile(name: str, parent: "settings" = None, **kwargs: Any) -> None:
        """Registers a collection of values to be used as a settings profile.

        Settings profiles can be loaded by name - for example, you might
        create a 'thorough' profile which runs many more trials on CI while
        keeping the 'default' profile for local runs.

        The arguments to this method are exactly as for
        :class:`~qcheck.settings`: optional ``parent`` settings, and
        keyword arguments for each setting that will be set differently to
        parent (or settings.default, if parent is None).
        """
        check_type(str, name, "name")
        settings._profiles[name] = settings(parent=parent, **kwargs)

    @staticmethod
    def get_profile(name: str) -> "settings":
        """Return the profile with the given name."""
        check_type(str, name, "name")
        try:
            return settings._profiles[name]
        except KeyError:
            raise InvalidArgument("Profile %r is not registered" % (name,)) from None

    @staticmethod
    def load_profile(name: str) -> None:
        """Loads in the settings defined in the profile provided.

        If the profile does not exist, InvalidArgument will be raised.
        Any setting not defined in the profile will be the library
        defined default for that setting.
        """
        check_type(str, name, "name")
        settings._current_profile = name
        settings._assign_default_internal(settings.get_profile(name))


@contextlib.contextmanager
def local_settings(s):
    with default_variable.with_value(s):
        yield s


@attr.s()
class Setting:
    name = attr.ib()
    description = attr.ib()
    default = attr.ib()
    options = attr.ib()
    validator = attr.ib()


def _positive_validator(name):
    def accept(x):
        check_type(int, x, name=name)
        if x < 1:
            raise InvalidArgument("%s=%r should be at least one." % (name, x))
        return x

    accept.__name__ = "_validate_%s" % (name,)
    return accept


settings._define_setting(
    "max_success",
    default=100,
    validator=_positive_validator("max_success"),
    description="""
Once this many trials have passed without finding a counter-example, the
property is considered to hold.
""",
)


def _validate_max_discarded(x):
    if x is None:
        return x
    check_type(int, x, name="max_discarded")
    if x < 1:
        raise InvalidArgument("max_discarded=%r should be at least one." % (x,))
    return x


settings._define_setting(
    "max_discarded",
    default=None,
    validator=_validate_max_discarded,
    show_default=False,
    description="""
Once this many trials have been discarded, either because an input could not
be generated or because an assumption did not hold, the check gives up.

None means five times max_success.
""",
)


settings._define_setting(
    "max_size",
    default=100,
    validator=_positive_validator("max_size"),
    description="""
The size hint grows linearly from 0 towards this value over the course of a
check. Generators use it to bound magnitudes and lengths.
""",
)


@unique
class Verbosity(IntEnum):
    quiet = 0
    normal = 1
    verbose = 2
    debug = 3

    def __repr__(self):
        return "Verbosity.%s" % (self.name,)


settings._define_setting(
    "verbosity",
    options=tuple(Verbosity),
    default=Verbosity.normal,
    description="Control the verbosity level of qcheck messages",
)


class duration(datetime.timedelta):
    """A timedelta specifically measured in seconds."""

    def __repr__(self):
        s = self.total_seconds()
        return "timedelta(seconds=%r)" % (int(s) if s == int(s) else s,)


def _validate_shrink_timeout(x):
    if x is None:
        return x
    invalid_timeout_error = InvalidArgument(
        "shrink_timeout=%r (type %s) must be a timedelta object, an integer or "
        "float number of seconds, or None to disable the shrinking time limit."
        % (x, type(x).__name__)
    )
    if isinstance(x, (int, float)):
        if isinstance(x, bool):
            raise invalid_timeout_error
        try:
            x = duration(seconds=x)
        except OverflowError:
            raise InvalidArgument(
                "shrink_timeout=%r is invalid, because it is too large to "
                "represent as a timedelta. Use shrink_timeout=None to disable "
                "the time limit." % (x,)
            ) from None
    if isinstance(x, datetime.timedelta):
        if x < datetime.timedelta(0):
            raise InvalidArgument(
                "shrink_timeout=%r is invalid, because it is negative. Use "
                "shrink_timeout=None to disable the time limit." % (x,)
            )
        return duration(seconds=x.total_seconds())
    raise invalid_timeout_error


settings._define_setting(
    "shrink_timeout",
    default=duration(seconds=30),
    validator=_validate_shrink_timeout,
    description="""
If set, a duration (as timedelta, or integer or float number of seconds) after
which shrinking a failing input stops and the smallest failing input found so
far is reported.

Set this to None to disable the limit entirely.
""",
)

settings.lock_further_definitions()


settings.register_profile("default", settings())
settings.load_profile("default")
assert settings.default is not None
