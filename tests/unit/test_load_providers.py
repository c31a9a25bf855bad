from app.scripts.load_providers import row_to_provider


def test_cms_row_is_mapped_to_provider():
    provider = row_to_provider(
        {
            "Rndrng_NPI": "1003000126",
            "Rndrng_Prvdr_Last_Org_Name": "Enkeshafi",
            "Rndrng_Prvdr_First_Name": "Ardalan",
            "Rndrng_Prvdr_City": "Bethesda",
            "Rndrng_Prvdr_State_Abrvtn": "MD",
            "Rndrng_Prvdr_Zip5": "20817",
            "Rndrng_Prvdr_Type": "Internal Medicine",
            "Tot_Benes": "401",
        }
    )

    assert provider is not None
    assert provider.npi == "1003000126"
    assert provider.last_name == "Enkeshafi"
    assert provider.specialty == "Internal Medicine"
    assert provider.state == "MD"


def test_row_without_npi_is_skipped():
    assert row_to_provider({"Rndrng_NPI": "  ", "Rndrng_Prvdr_City": "Bethesda"}) is None


def test_blank_values_become_null():
    provider = row_to_provider({"Rndrng_NPI": "1", "Rndrng_Prvdr_First_Name": " "})
    assert provider.first_name is None
