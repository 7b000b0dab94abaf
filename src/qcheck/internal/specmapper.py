# This file is part of qcheck.
#
# Copyright the qcheck Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from qcheck.errors import InvalidArgument


class SpecificationMapper:
    """Maps descriptions of some type to a type. Has configurable handlers for
    what a description may look like. Handlers for descriptions may take either
    a specific value or all instances of a type and have access to the mapper
    to look up types.

    Also supports prototype based inheritance, with children being able to
    override specific handlers

    There is a single default() object per subclass of SpecificationMapper
    which everything has as a prototype if it's not assigned any other
    prototype. This allows you to define the mappers on the default object
    and have them inherited by any custom mappers you want.
    """

    @classmethod
    def default(cls):
        key = "_%s_default_mapper" % (cls.__name__,)
        try:
            return cls.__dict__[key]
        except KeyError:
            pass
        result = cls()
        setattr(cls, key, result)
        return result

    def __init__(self, prototype=None):
        self.value_mappers = {}
        self.instance_mappers = {}
        self.__prototype = prototype
        self.__descriptor_cache = {}

    def prototype(self):
        if self.__prototype:
            return self.__prototype
        if self is self.default():
            return None
        return self.default()

    def define_specification_for(self, value, specification):
        self.value_mappers.setdefault(value, []).append(specification)
        self.clear_cache()

    def define_specification_for_instances(self, cls, specification):
        self.instance_mappers.setdefault(cls, []).append(specification)
        self.clear_cache()

    def clear_cache(self):
        self.__descriptor_cache = {}

    def new_child_mapper(self):
        return self.__class__(prototype=self)

    def specification_for(self, descriptor):
        try:
            return self.__descriptor_cache[descriptor]
        except (KeyError, TypeError):
            pass
        r = self._calculate_specification_for(descriptor)
        try:
            self.__descriptor_cache[descriptor] = r
        except TypeError:
            pass
        return r

    def _calculate_specification_for(self, descriptor):
        for h in self.find_specification_handlers_for(descriptor):
            try:
                return h(self, descriptor)
            except NextInChain:
                pass
        return self.missing_specification(descriptor)

    def has_specification_for(self, descriptor):
        try:
            self.specification_for(descriptor)
            return True
        except InvalidArgument:
            return False

    def find_specification_handlers_for(self, descriptor):
        if safe_in(descriptor, self.value_mappers):
            yield from reversed(self.value_mappers[descriptor])
        for cls in typekey(descriptor).__mro__:
            yield from reversed(self.instance_mappers.get(cls, ()))
        if self.prototype():
            yield from self.prototype().find_specification_handlers_for(descriptor)

    def missing_specification(self, descriptor):
        raise MissingSpecification(descriptor)


def typekey(x):
    return x.__class__


def safe_in(x, ys):
    """Test if x is present in ys even if x is unhashable."""
    try:
        return x in ys
    except TypeError:
        return False


def next_in_chain():
    raise NextInChain()


class NextInChain(Exception):
    def __init__(self):
        super().__init__(
            "Not handled. Call next in chain. You shouldn't have seen this "
            "exception."
        )


class MissingSpecification(InvalidArgument):
    def __init__(self, descriptor):
        super().__init__(
            "Unable to produce specification for descriptor %r" % (descriptor,)
        )
        self.descriptor = descriptor
