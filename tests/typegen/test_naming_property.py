# topmark:header:start
#
#   project      : StrapiTypes
#   file         : test_naming_property.py
#   file_relpath : tests/typegen/test_naming_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests for interface and property naming.

Strapi names are kebab-case segments; component UIDs join category and name
with ``.``. Generated names must agree however they are derived.
"""

from __future__ import annotations

import json

from hypothesis import given
from hypothesis import strategies as st

from strapi_types.schema.model import ComponentRef
from strapi_types.typegen.assembler import render_property_name
from strapi_types.typegen.naming import component_interface_name, to_interface_name

s_segment = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789", min_size=1, max_size=8)
s_kebab = st.lists(s_segment, min_size=1, max_size=4).map("-".join)


@given(category=s_kebab, name=s_kebab)
def test_component_name_agrees_with_uid(category: str, name: str) -> None:
    """A component file and a UID reference to it yield the same interface name."""
    ref = ComponentRef(category=category, name=name)
    derived: str = component_interface_name(ref)

    assert derived == to_interface_name(ref.uid)
    assert "-" not in derived
    assert "." not in derived


@given(name=st.text(min_size=1, max_size=20))
def test_property_name_is_valid_key(name: str) -> None:
    """Property keys are either bare identifiers or JSON strings decoding to the name."""
    key: str = render_property_name(name)
    if key == name:
        assert not key.startswith('"')
    else:
        assert json.loads(key) == name
