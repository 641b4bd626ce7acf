"""XML model codec tests."""

from typing import Optional
from xml.etree import ElementTree

import pytest
from pydantic import BaseModel, Field, ValidationError

from enumerations.catalogs.discount import ValidatedDiscountID
from enumerations.catalogs.gender import GenderID
from enumerations.catalogs.incident import ValidatedIncidentID
from enumerations.catalogs.state import StateID
from enumerations.core.errors import MarshalInvalidIDError
from enumerations.core.walker import validate_fields
from enumerations.core.xml_codec import model_from_xml, model_to_xml, model_to_xml_string


class Driver(BaseModel):
    gender: Optional[GenderID] = Field(default=None, alias="Gender")
    incident: Optional[ValidatedIncidentID] = Field(default=None, alias="Incident")
    discounts: list[ValidatedDiscountID] = Field(default_factory=list, alias="Discount")


class Policy(BaseModel):
    state: Optional[StateID] = Field(default=None, alias="State")
    drivers: list[Driver] = Field(default_factory=list, alias="Driver")
    paperless: bool = Field(default=False, alias="Paperless")


class TestEncode:
    """Test model to XML encoding."""

    def test_canonical_ids(self):
        driver = Driver.model_validate({"Gender": "m", "Incident": "atfault"})
        assert model_to_xml_string(driver) == (
            "<Driver><Gender>M</Gender><Incident>AtFaultAccident</Incident></Driver>"
        )

    def test_none_fields_are_omitted(self):
        assert model_to_xml_string(Driver()) == "<Driver />"

    def test_invalid_capture_encodes_empty_text(self):
        driver = Driver.model_validate({"Incident": "fender-bender"})
        element = model_to_xml(driver)
        assert element.find("Incident").text == ""

    def test_nested_and_repeated(self):
        policy = Policy.model_validate(
            {
                "State": "va",
                "Paperless": True,
                "Driver": [
                    {"Gender": "F", "Discount": ["online", "PIF"]},
                    {"Gender": "M"},
                ],
            }
        )
        element = model_to_xml(policy, tag="Policy")

        assert element.find("State").text == "VA"
        assert element.find("Paperless").text == "true"
        drivers = element.findall("Driver")
        assert [d.find("Gender").text for d in drivers] == ["F", "M"]
        assert [d.text for d in drivers[0].findall("Discount")] == ["online", "pif"]

    def test_invalid_strict_id_fails(self):
        driver = Driver()
        driver.gender = GenderID("X")
        with pytest.raises(MarshalInvalidIDError):
            model_to_xml(driver)


class TestDecode:
    """Test XML to model decoding."""

    def test_strict_and_capturing(self):
        driver = model_from_xml(
            Driver, "<Driver><Gender>f</Gender><Incident>notatfault</Incident></Driver>"
        )
        assert driver.gender == "F"
        assert driver.incident.id() == "NonChargeableAccident"
        assert driver.incident.captured_value() == "notatfault"

    def test_strict_unknown_fails(self):
        with pytest.raises(ValidationError):
            model_from_xml(Driver, "<Driver><Gender>X</Gender></Driver>")

    def test_capturing_unknown_is_kept(self):
        driver = model_from_xml(Driver, "<Driver><Incident>fender-bender</Incident></Driver>")
        assert not driver.incident.valid()
        assert driver.incident.captured_value() == "fender-bender"
        assert len(driver.incident.errors) == 1
        assert validate_fields(driver) == {"incident": "fender-bender"}

    def test_empty_elements(self):
        driver = model_from_xml(Driver, "<Driver><Gender /><Incident></Incident></Driver>")
        assert driver.gender is None
        assert driver.incident.captured_value() == ""
        assert driver.incident.errors == []

    def test_nested_and_repeated(self):
        policy = model_from_xml(
            Policy,
            "<Policy><State>tx</State><Paperless>true</Paperless>"
            "<Driver><Gender>M</Gender><Discount>online</Discount><Discount>bogus</Discount></Driver>"
            "<Driver><Gender>F</Gender></Driver></Policy>",
        )
        assert policy.state == "TX"
        assert policy.paperless is True
        assert [d.gender for d in policy.drivers] == ["M", "F"]
        assert [d.valid() for d in policy.drivers[0].discounts] == [True, False]

    def test_accepts_element(self):
        element = ElementTree.fromstring("<Driver><Gender>M</Gender></Driver>")
        assert model_from_xml(Driver, element).gender == "M"

    def test_malformed_xml(self):
        with pytest.raises(ElementTree.ParseError):
            model_from_xml(Driver, "<Driver><Gender>M</Driver>")
