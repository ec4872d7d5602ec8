# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Property tests: serialization round-trips and freezing invariants.

Uses hypothesis to verify that any valid instance survives
serialize/deserialize (and JSON) unchanged, polymorphic and decimal-keyed
fields included, and that later mutation of the caller's containers never
reaches a constructed instance.
"""

from decimal import Decimal

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from strictval import StructureBuilder, ValidationError, integer, poly_structure

Hobby = StructureBuilder("Hobby").string("desc").integer("difficulty", positive=True).build()
Cat = StructureBuilder("Cat").string("name").boolean("indoor").build()
Dog = StructureBuilder("Dog").string("name").decimal("weight", positive=True).build()
_PETS = {"cat": Cat, "dog": Dog}

Profile = (
    StructureBuilder("Profile")
    .string("name")
    .array("hobbies", Hobby)
    .map("balances", str, Decimal)
    .tuple("location", [float, float])
    .enum("plan", str, ["free", "pro"])
    .boolean("verified")
    .integer("age", nullable=True, nonnegative=True)
    .poly_structure("favourite", _PETS)
    .array("pets", poly_structure(_PETS, nullable=True))
    .map("ledger", Decimal, int)
    .build()
)

_hobbies = st.lists(
    st.builds(Hobby, desc=st.text(), difficulty=st.integers(min_value=1)),
    max_size=5,
)
_decimals = st.decimals(allow_nan=False, allow_infinity=False)
_floats = st.floats(allow_nan=False, allow_infinity=False)
_weights = st.decimals(min_value=Decimal("0.001"), allow_nan=False, allow_infinity=False)
_pets = st.one_of(
    st.builds(Cat, name=st.text(), indoor=st.booleans()),
    st.builds(Dog, name=st.text(), weight=_weights),
)


@st.composite
def _profile_values(draw: st.DrawFn) -> dict:
    return {
        "name": draw(st.text()),
        "hobbies": draw(_hobbies),
        "balances": draw(st.dictionaries(st.text(), _decimals, max_size=5)),
        "location": [draw(_floats), draw(_floats)],
        "plan": draw(st.sampled_from(["free", "pro"])),
        "verified": draw(st.booleans()),
        "age": draw(st.none() | st.integers(min_value=0)),
        "favourite": draw(_pets),
        "pets": draw(st.lists(st.none() | _pets, max_size=4)),
        "ledger": draw(st.dictionaries(_decimals, st.integers(), max_size=5)),
    }


@given(values=_profile_values())
@settings(max_examples=100)
def test_serialize_round_trip(values):
    """deserialize(serialize(x)) == x for every valid instance."""
    profile = Profile(values)
    restored = Profile.deserialize(profile.serialize())
    assert restored == profile
    assert type(restored.favourite) is type(profile.favourite)


@given(values=_profile_values())
@settings(max_examples=100)
def test_json_round_trip(values):
    """from_json(to_json(x)) == x for every valid instance."""
    profile = Profile(values)
    assert Profile.from_json(profile.to_json()) == profile


@given(values=_profile_values(), extra=_hobbies)
@settings(max_examples=50)
def test_caller_mutation_is_not_observed(values, extra):
    """Mutating the input containers after construction leaves the instance unchanged."""
    profile = Profile(values)
    snapshot = profile.serialize()
    values["hobbies"].extend(extra)
    values["balances"]["__mutated__"] = Decimal("1")
    values["location"].append(0.0)
    values["pets"].append(None)
    values["ledger"][Decimal("-1.5")] = 0
    assert profile.serialize() == snapshot
    hash(profile)


@given(value=st.integers())
def test_positive_validator_matches_comparison(value):
    """The positive validator accepts exactly the values greater than zero."""
    descriptor = integer(positive=True)
    if value > 0:
        descriptor.validate("n", value)
    else:
        with pytest.raises(ValidationError):
            descriptor.validate("n", value)


@given(value=st.integers())
def test_nonnegative_validator_matches_comparison(value):
    """The nonnegative validator accepts exactly the values >= 0."""
    descriptor = integer(nonnegative=True)
    if value >= 0:
        descriptor.validate("n", value)
    else:
        with pytest.raises(ValidationError):
            descriptor.validate("n", value)
