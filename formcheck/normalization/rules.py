"""Mapping from data-type tags to normalization actions."""

from types import MappingProxyType

from formcheck.fields.enums import DataTypeTag, FieldAction

DEFAULT_ACTION = FieldAction.TRIM

_ACTIONS = MappingProxyType({
    DataTypeTag.EMAIL_ADDRESS.value: FieldAction.LOWERCASE_EMAIL,
    DataTypeTag.PHONE_NUMBER.value: FieldAction.FORMAT_PHONE,
    DataTypeTag.FIRST_NAME.value: FieldAction.PROPER_CASE_FIRST_NAME,
    DataTypeTag.FORENAME.value: FieldAction.PROPER_CASE_FIRST_NAME,
    DataTypeTag.LAST_NAME.value: FieldAction.PROPER_CASE_LAST_NAME,
    DataTypeTag.SURNAME.value: FieldAction.PROPER_CASE_LAST_NAME,
})


class FieldRuleTable:
    """Total mapping from a data-type tag to a FieldAction.

    Tags are matched exactly. Anything not in the table, including
    Country, custom tags and no tag at all, gets DEFAULT_ACTION.
    """

    def __init__(self, overrides: dict[str, FieldAction] | None = None) -> None:
        self._actions = dict(_ACTIONS)
        if overrides:
            self._actions.update(overrides)

    def rule_for(self, tag: DataTypeTag | str | None) -> FieldAction:
        if tag is None:
            return DEFAULT_ACTION
        key = tag.value if isinstance(tag, DataTypeTag) else tag
        return self._actions.get(key, DEFAULT_ACTION)
