"""Tests for NormalizationDispatcher."""

import pytest

from formcheck.fields import (
    DataTypeTag,
    FieldChange,
    FieldDescriptor,
    RecordType,
    TelephoneValidationRule,
)
from formcheck.normalization.dispatcher import NormalizationDispatcher, apply_changes
from formcheck.providers.verification import (
    MockVerificationService,
    ServiceCredentials,
    VerificationTransportError,
)


@pytest.fixture
def dispatcher(service: MockVerificationService, credentials: ServiceCredentials):
    return NormalizationDispatcher(service, credentials)


class TestNormalize:
    """Tests for NormalizationDispatcher.normalize."""

    def test_email_lowercased_and_trimmed(self, dispatcher, contact_type) -> None:
        """Email addresses are trimmed and lower-cased."""
        record = contact_type.create(email=" A@B.COM ")
        changes = dispatcher.normalize(record)
        assert changes == [FieldChange(field_name="email", old_value=" A@B.COM ", new_value="a@b.com")]

    def test_record_not_modified(self, dispatcher, contact_type) -> None:
        """normalize only reports changes."""
        record = contact_type.create(email=" A@B.COM ")
        dispatcher.normalize(record)
        assert record.get("email") == " A@B.COM "

    def test_names_proper_cased(self, dispatcher, contact_type) -> None:
        """First names and surnames are proper-cased."""
        record = contact_type.create(first_name="JOHN", last_name="  mcdonald ")
        changes = {c.field_name: c.new_value for c in dispatcher.normalize(record)}
        assert changes == {"first_name": "John", "last_name": "McDonald"}

    def test_untagged_fields_trimmed(self, dispatcher, contact_type) -> None:
        """Fields without a recognised tag are only trimmed."""
        record = contact_type.create(notes="  Leave at the Door  ", country=" gb ")
        changes = {c.field_name: c.new_value for c in dispatcher.normalize(record)}
        assert changes == {"notes": "Leave at the Door", "country": "gb"}

    def test_read_only_field_never_reported(self, dispatcher, contact_type) -> None:
        """Read-only fields are skipped whatever their value."""
        record = contact_type.create(reference="  ABC  ")
        assert dispatcher.normalize(record) == []

    def test_non_string_and_null_values_skipped(self, dispatcher, contact_type) -> None:
        """Only string values are normalized."""
        record = contact_type.create(notes=42, email=None)
        assert dispatcher.normalize(record) == []

    def test_unchanged_values_not_reported(self, dispatcher, contact_type) -> None:
        """Values already in normal form produce no change."""
        record = contact_type.create(first_name="John", email="a@b.com", notes="")
        assert dispatcher.normalize(record) == []

    def test_idempotent(self, dispatcher, contact_type) -> None:
        """Normalizing a normalized record changes nothing."""
        record = contact_type.create(
            first_name=" o'brien", last_name="MACINTYRE ", email=" X@Y.ORG", notes=" n "
        )
        dispatcher.standardize(record)
        assert dispatcher.normalize(record) == []

    def test_changes_in_declaration_order(self, dispatcher, contact_type) -> None:
        """Changes follow the record type's field order."""
        record = contact_type.create(notes=" n ", email=" E@X.COM", first_name="ann")
        names = [c.field_name for c in dispatcher.normalize(record)]
        assert names == ["first_name", "email", "notes"]


class TestPhoneFormatting:
    """Tests for telephone number formatting during normalization."""

    def test_formatted_number_used_on_success(self, credentials, contact_type) -> None:
        """The service's formatted number replaces the value."""
        service = MockVerificationService(formatted_numbers={"02079460000": "+44 20 7946 0000"})
        dispatcher = NormalizationDispatcher(service, credentials)
        record = contact_type.create(phone=" 02079460000 ")

        changes = dispatcher.normalize(record)

        assert changes[0].new_value == "+44 20 7946 0000"
        assert service.call_history[0]["number"] == "02079460000"
        assert service.call_history[0]["default_country"] == "GB"

    def test_trimmed_value_kept_on_service_failure(self, credentials, contact_type) -> None:
        """A non-success status leaves the trimmed number."""
        service = MockVerificationService(available=False)
        dispatcher = NormalizationDispatcher(service, credentials)
        record = contact_type.create(phone=" 02079460000 ")

        changes = dispatcher.normalize(record)

        assert changes[0].new_value == "02079460000"

    def test_transport_error_does_not_stop_pass(self, credentials, contact_type) -> None:
        """Transport errors fall back to the trimmed value and later fields still run."""
        service = MockVerificationService(error=VerificationTransportError("timeout"))
        dispatcher = NormalizationDispatcher(service, credentials)
        record = contact_type.create(phone="0207 946 0000 ", notes=" n ")

        changes = {c.field_name: c.new_value for c in dispatcher.normalize(record)}

        assert changes == {"phone": "0207 946 0000", "notes": "n"}

    def test_country_from_sibling_field(self, service, credentials, contact_type) -> None:
        """A Country field in the record supplies the default country."""
        dispatcher = NormalizationDispatcher(
            service, credentials, default_country="GB", process_default_country="FR"
        )
        dispatcher.normalize(contact_type.create(phone="5550100", country="US"))
        assert service.call_history[0]["default_country"] == "US"

    def test_country_precedence_without_sibling(self, service, credentials, contact_type) -> None:
        """Dispatcher default, then process default, then GB."""
        NormalizationDispatcher(
            service, credentials, default_country="IE", process_default_country="FR"
        ).normalize(contact_type.create(phone="1"))
        NormalizationDispatcher(
            service, credentials, process_default_country="FR"
        ).normalize(contact_type.create(phone="2"))
        NormalizationDispatcher(service, credentials).normalize(contact_type.create(phone="3"))

        countries = [call["default_country"] for call in service.call_history]
        assert countries == ["IE", "FR", "GB"]

    def test_named_country_field(self, service, credentials) -> None:
        """A telephone rule can name the sibling field holding the country."""
        record_type = RecordType(
            name="order",
            descriptors=(
                FieldDescriptor(
                    name="mobile",
                    data_type=DataTypeTag.PHONE_NUMBER,
                    validation=TelephoneValidationRule(default_country_field="delivery_country"),
                ),
                FieldDescriptor(name="delivery_country"),
                FieldDescriptor(name="billing_country", data_type=DataTypeTag.COUNTRY),
            ),
        )
        dispatcher = NormalizationDispatcher(service, credentials)
        dispatcher.normalize(
            record_type.create(mobile="0871", delivery_country="IE", billing_country="FR")
        )
        assert service.call_history[0]["default_country"] == "IE"

    def test_rule_default_country_preferred(self, service, credentials) -> None:
        """A telephone rule's default country beats the dispatcher default."""
        record_type = RecordType(
            name="supplier",
            descriptors=(
                FieldDescriptor(
                    name="phone",
                    data_type=DataTypeTag.PHONE_NUMBER,
                    validation=TelephoneValidationRule(default_country="US"),
                ),
                FieldDescriptor(name="fax", data_type=DataTypeTag.PHONE_NUMBER),
            ),
        )
        dispatcher = NormalizationDispatcher(
            service, credentials, default_country="IE", process_default_country="FR"
        )
        dispatcher.normalize(record_type.create(phone="5550100", fax="5550199"))

        countries = [call["default_country"] for call in service.call_history]
        assert countries == ["US", "IE"]

    def test_empty_phone_not_sent(self, service, credentials, contact_type) -> None:
        """Blank numbers are not sent to the service."""
        dispatcher = NormalizationDispatcher(service, credentials)
        changes = dispatcher.normalize(contact_type.create(phone="   "))
        assert service.call_history == []
        assert changes[0].new_value == ""

    def test_custom_tag_string(self, service, credentials) -> None:
        """Tags given as plain strings dispatch the same as enum tags."""
        record_type = RecordType(
            name="lead",
            descriptors=(FieldDescriptor(name="surname", data_type="Surname"),),
        )
        dispatcher = NormalizationDispatcher(service, credentials)
        changes = dispatcher.normalize(record_type.create(surname="o'brien"))
        assert changes[0].new_value == "O'Brien"


class TestStandardize:
    """Tests for writing changes back."""

    def test_changes_written_to_record_and_form_state(self, dispatcher, contact_type) -> None:
        """standardize updates the record and the parallel form state."""
        record = contact_type.create(email=" A@B.COM ", reference=" R ")
        form_state = {"email": " A@B.COM ", "reference": " R "}

        changes = dispatcher.standardize(record, form_state)

        assert len(changes) == 1
        assert record.get("email") == "a@b.com"
        assert form_state == {"email": "a@b.com", "reference": " R "}
        assert record.get("reference") == " R "

    def test_apply_changes_rejects_unknown_field(self, contact_type) -> None:
        """Changes must name declared fields."""
        record = contact_type.create()
        with pytest.raises(KeyError):
            apply_changes(record, [FieldChange(field_name="nope", old_value="a", new_value="b")])
