# tests/test_config.py

"""
Tests for FieldConfig.
"""

import dataclasses

import pytest

from imbus.config import FieldConfig


class TestFieldConfigDefaults:
    """Default survey column names."""

    def test_defaults(self):
        config = FieldConfig()
        assert config.gear_field == "Regulated_gear"
        assert config.spatial_field == "StatRec"
        assert config.time_field == "Year"
        assert config.area_field == "AREA_KM2"
        assert config.swept_area_field == "SweptArea_KM2"
        assert config.species_field == "Code"
        assert config.age_field == "Age"
        assert config.abundance_field == "R"

    def test_table_columns(self):
        config = FieldConfig()
        assert config.effort_columns == ["Year", "StatRec", "Regulated_gear", "SweptArea_KM2"]
        assert config.spatial_columns == ["StatRec", "AREA_KM2"]
        assert config.species_columns == ["Code", "Year", "StatRec", "Age", "R"]
        assert config.gear_efficiency_keys == ["Code", "Age"]

    def test_immutable(self):
        config = FieldConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.gear_field = "Gear"


class TestFieldConfigValidation:
    """Eager validation on construction."""

    def test_blank_name(self):
        with pytest.raises(ValueError, match="gear_field"):
            FieldConfig(gear_field="  ")

    def test_non_string(self):
        with pytest.raises(ValueError, match="time_field"):
            FieldConfig(time_field=2020)

    def test_shared_column(self):
        with pytest.raises(ValueError, match="both map to column 'Rect'"):
            FieldConfig(spatial_field="Rect", area_field="Rect")


class TestFieldConfigConstruction:
    """from_dict / from_yaml / to_yaml."""

    def test_from_dict_partial(self):
        config = FieldConfig.from_dict({"gear_field": "Gear"})
        assert config.gear_field == "Gear"
        assert config.spatial_field == "StatRec"

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown field options"):
            FieldConfig.from_dict({"gearfld": "Gear"})

    def test_from_yaml_top_level(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("gear_field: Gear\nspatial_field: ICESrect\n")
        config = FieldConfig.from_yaml(str(path))
        assert config.gear_field == "Gear"
        assert config.spatial_field == "ICESrect"

    def test_from_yaml_fields_key(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("fields:\n  species_field: SpecCode\n")
        assert FieldConfig.from_yaml(str(path)).species_field == "SpecCode"

    def test_from_yaml_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert FieldConfig.from_yaml(str(path)) == FieldConfig()

    def test_from_yaml_not_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- Gear\n- StatRec\n")
        with pytest.raises(ValueError, match="mapping"):
            FieldConfig.from_yaml(str(path))

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FieldConfig.from_yaml(str(tmp_path / "missing.yaml"))

    def test_yaml_round_trip(self, tmp_path):
        path = tmp_path / "config.yaml"
        config = FieldConfig(gear_field="Gear", age_field="AgeClass")
        config.to_yaml(str(path))
        assert FieldConfig.from_yaml(str(path)) == config
