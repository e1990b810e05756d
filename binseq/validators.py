"""
binseq Validators

Boolean predicates over byte content, combined with all_of / any_of /
not_. A Validator is also callable, so plain functions can stand in for
one anywhere a validator is accepted.

Usage:
    key.validate(exact_length(16), not_only_of(0))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union


class Validator(ABC):

    @abstractmethod
    def validate(self, data: bytes | bytearray) -> bool:
        ...

    def __call__(self, data: bytes | bytearray) -> bool:
        return self.validate(data)


ValidatorLike = Union[Validator, Callable[[bytes], bool]]


class LengthMode(Enum):
    AT_LEAST = ">="
    AT_MOST = "<="
    EXACT = "=="


@dataclass(frozen=True)
class Length(Validator):
    ref_length: int
    mode: LengthMode

    def validate(self, data: bytes | bytearray) -> bool:
        if self.mode is LengthMode.AT_LEAST:
            return len(data) >= self.ref_length
        if self.mode is LengthMode.AT_MOST:
            return len(data) <= self.ref_length
        return len(data) == self.ref_length


class ContentMode(Enum):
    ONLY_OF = "only_of"
    NONE_OF = "none_of"
    NOT_ONLY_OF = "not_only_of"


@dataclass(frozen=True)
class IdenticalContent(Validator):
    ref_byte: int
    mode: ContentMode

    def validate(self, data: bytes | bytearray) -> bool:
        ref = self.ref_byte & 0xFF
        if self.mode is ContentMode.ONLY_OF:
            return all(b == ref for b in data)
        if self.mode is ContentMode.NONE_OF:
            return all(b != ref for b in data)
        # empty input is "only of" anything, so never "not only of"
        return any(b != ref for b in data)


@dataclass(frozen=True)
class Logical(Validator):
    """AND / OR over several validators, or NOT over exactly one."""
    validators: tuple[ValidatorLike, ...]
    operator: str

    def validate(self, data: bytes | bytearray) -> bool:
        if self.operator == "not":
            return not self.validators[0](data)
        if self.operator == "or":
            return any(v(data) for v in self.validators)
        return all(v(data) for v in self.validators)


def at_least(length: int) -> Validator:
    return Length(length, LengthMode.AT_LEAST)


def at_most(length: int) -> Validator:
    return Length(length, LengthMode.AT_MOST)


def exact_length(length: int) -> Validator:
    return Length(length, LengthMode.EXACT)


def only_of(ref_byte: int) -> Validator:
    return IdenticalContent(ref_byte, ContentMode.ONLY_OF)


def not_only_of(ref_byte: int) -> Validator:
    return IdenticalContent(ref_byte, ContentMode.NOT_ONLY_OF)


def none_of(ref_byte: int) -> Validator:
    return IdenticalContent(ref_byte, ContentMode.NONE_OF)


def all_of(*validators: ValidatorLike) -> Validator:
    return Logical(tuple(validators), "and")


def any_of(*validators: ValidatorLike) -> Validator:
    return Logical(tuple(validators), "or")


def not_(validator: ValidatorLike) -> Validator:
    return Logical((validator,), "not")
