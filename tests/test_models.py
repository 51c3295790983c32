"""Unit tests for profile and color models."""

import json
from datetime import timedelta
from uuid import UUID

import pytest

from simleds.exceptions import InvalidProfile, ProfileFileInvalidError
from simleds.models import (
    BlueFlagContainer,
    CarStartedGroupContainer,
    Color,
    ConditionalGroupContainer,
    LedProfile,
    RpmContainer,
    RpmMode,
    RpmSegmentsContainer,
    SimpleGroupContainer,
    SpeedLimiterAnimationContainer,
    StackingType,
    UnknownContainer,
    WhiteFlagContainer,
    YellowFlagContainer,
    container_tag,
    load_profile,
)


class TestColor:
    """Test Color model."""

    @pytest.mark.unit
    def test_create_color(self):
        """Test creating a color with RGB values."""
        color = Color(r=100, g=50, b=25)
        assert color.to_rgb_tuple() == (100, 50, 25)

    @pytest.mark.unit
    def test_rgb_range_validation(self):
        """Test that RGB values must be 0-255."""
        with pytest.raises(ValueError):
            Color(r=256, g=0, b=0)

        with pytest.raises(ValueError):
            Color(r=0, g=-1, b=0)

    @pytest.mark.unit
    def test_preset_color_off(self):
        """Test off color factory method."""
        assert Color.off() == Color(r=0, g=0, b=0)

    @pytest.mark.unit
    def test_to_hex(self):
        assert Color(r=255, g=128, b=0).to_hex() == "#FF8000"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Lime", (0, 255, 0)),
            ("red", (255, 0, 0)),
            ("#0000ff", (0, 0, 255)),
            ("#FFFF00", (255, 255, 0)),
            ("0,255,0", (0, 255, 0)),
            (" 12, 34 ,56 ", (12, 34, 56)),
        ],
    )
    def test_parse(self, text, expected):
        """Test CSS names, hex strings and r,g,b triples."""
        assert Color.parse(text).to_rgb_tuple() == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["0, 700, 0", "0,-1,0", "1,2,x", "notacolor", ""])
    def test_parse_rejects_invalid(self, text):
        with pytest.raises(ValueError):
            Color.parse(text)

    @pytest.mark.unit
    def test_lerp(self):
        """Test RGB interpolation rounds half up."""
        lime, red = Color.parse("Lime"), Color.parse("Red")
        assert lime.lerp(red, 0) == lime
        assert lime.lerp(red, 1) == red
        assert lime.lerp(red, 0.25).to_rgb_tuple() == (64, 191, 0)
        assert lime.lerp(red, 0.5).to_rgb_tuple() == (128, 128, 0)
        assert lime.lerp(red, 0.75).to_rgb_tuple() == (191, 64, 0)

    @pytest.mark.unit
    def test_lerp_clamps_factor(self):
        lime, red = Color.parse("Lime"), Color.parse("Red")
        assert lime.lerp(red, -3) == lime
        assert lime.lerp(red, 7) == red


class TestContainerTag:
    """Test discriminator handling."""

    @pytest.mark.unit
    def test_last_segment_is_significant(self):
        assert container_tag("A.B.C.RPMContainer") == "RPMContainer"
        assert container_tag("RPMContainer") == "RPMContainer"


class TestLedProfile:
    """Test parsing of profile documents."""

    @pytest.mark.unit
    def test_parse_metadata(self, profile_json):
        profile = LedProfile.from_json(profile_json)
        assert profile.name == "GT3 wheel"
        assert profile.profile_id == UUID("5d1f3c52-7a42-4b6e-9a57-0f2c8f3e6a11")
        assert profile.global_brightness == 0.8
        assert profile.use_profile_brightness is True
        assert profile.game_code == "AssettoCorsaCompetizione"
        assert profile.embedded_javascript is None

    @pytest.mark.unit
    def test_rpm_container_defaults_to_absolute_mode(self):
        """Test that a missing UsePercent selects the RPMMin/RPMMax range."""
        rpm = RpmContainer.model_validate(
            {
                "ContainerType": "RPMContainer",
                "LedCount": 4,
                "RPMMin": 3000,
                "RPMMax": 7000,
                "StartColor": "Lime",
                "EndColor": "Red",
            }
        )
        assert rpm.use_percent is False
        assert (rpm.rpm_min, rpm.rpm_max) == (3000, 7000)

    @pytest.mark.unit
    def test_container_variants(self, profile_json):
        profile = LedProfile.from_json(profile_json)
        rpm, group, limiter, unknown = profile.led_containers

        assert isinstance(rpm, RpmContainer)
        assert rpm.led_count == 5
        assert rpm.percent_min == 85
        assert rpm.start_color == Color(r=0, g=255, b=0)
        assert rpm.blink_delay == timedelta(milliseconds=100)

        assert isinstance(group, SimpleGroupContainer)
        assert group.stacking_type is StackingType.LEFT_TO_RIGHT
        assert [type(c) for c in group.led_containers] == [
            YellowFlagContainer,
            BlueFlagContainer,
            WhiteFlagContainer,
        ]
        assert group.led_containers[1].enabled is False
        assert group.led_containers[1].color == Color(r=0, g=0, b=255)

        assert isinstance(limiter, SpeedLimiterAnimationContainer)

    @pytest.mark.unit
    def test_unknown_container_is_kept(self, profile_json):
        profile = LedProfile.from_json(profile_json)
        unknown = profile.led_containers[3]

        assert isinstance(unknown, UnknownContainer)
        assert unknown.container_type == "TyreTemperatureContainer"
        assert unknown.start_position == 12
        assert unknown.raw_content["Sensitivity"] == 3

    @pytest.mark.unit
    def test_snake_case_keys(self):
        profile = LedProfile.model_validate(
            {
                "name": "snake",
                "profile_id": "5d1f3c52-7a42-4b6e-9a57-0f2c8f3e6a11",
                "led_containers": [
                    {
                        "container_type": "WhiteFlagContainer",
                        "led_count": 2,
                        "color": "White",
                    }
                ],
            }
        )
        flag = profile.led_containers[0]
        assert isinstance(flag, WhiteFlagContainer)
        assert flag.start_position == 1
        assert flag.blink_enabled is False

    @pytest.mark.unit
    def test_group_variants(self):
        profile = LedProfile.model_validate(
            {
                "Name": "groups",
                "ProfileId": "5d1f3c52-7a42-4b6e-9a57-0f2c8f3e6a11",
                "LedContainers": [
                    {"ContainerType": "GameCarStatedGroupContainer", "Duration": 3000, "LedContainers": []},
                    {
                        "ContainerType": "CustomConditionalGroupContainer",
                        "TriggerFormula": {"Expression": "[DataCorePlugin.GameData.Gear] == 'R'"},
                        "LedContainers": [],
                    },
                ],
            }
        )
        car_started, conditional = profile.led_containers
        assert isinstance(car_started, CarStartedGroupContainer)
        assert car_started.duration == timedelta(seconds=3)
        assert car_started.stacking_type is StackingType.LAYERED
        assert isinstance(conditional, ConditionalGroupContainer)
        assert "Gear" in conditional.trigger_formula.expression

    @pytest.mark.unit
    def test_segments(self):
        container = RpmSegmentsContainer.model_validate(
            {
                "RpmMode": 2,
                "BlinkDelay": 125,
                "Segments": [
                    {"StartValue": 5000, "NormalColor": "Lime", "BlinkingColor": "Blue", "LedCount": 3},
                    {
                        "StartValue": 8000,
                        "NormalColor": "Blue",
                        "BlinkingColor": "Red",
                        "UseBlinkingColor": False,
                        "LedCount": 3,
                    },
                ],
            }
        )
        assert container.rpm_mode is RpmMode.RPM
        assert container.blink_enabled is True
        assert container.segments[0].blink_color == Color.parse("Blue")
        assert container.segments[1].blink_color is None

    @pytest.mark.unit
    def test_models_are_frozen(self, profile_json):
        profile = LedProfile.from_json(profile_json)
        with pytest.raises(ValueError):
            profile.name = "renamed"


class TestInvalidProfile:
    """Test that malformed profiles fail with InvalidProfile."""

    def _with_rpm_field(self, document, **fields):
        document["LedContainers"][0].update(fields)
        return json.dumps(document)

    @pytest.mark.unit
    def test_out_of_range_color_component(self, profile_document):
        text = self._with_rpm_field(profile_document, StartColor="0, 700, 0")
        with pytest.raises(InvalidProfile) as exc_info:
            LedProfile.from_json(text)
        assert exc_info.value.field.endswith("StartColor")
        assert "LedContainers.0" in exc_info.value.field

    @pytest.mark.unit
    def test_unknown_color_name(self, profile_document):
        text = self._with_rpm_field(profile_document, EndColor="Plaid")
        with pytest.raises(InvalidProfile) as exc_info:
            LedProfile.from_json(text)
        assert "EndColor" in exc_info.value.field
        assert exc_info.value.recovery_hint is not None

    @pytest.mark.unit
    def test_zero_start_position(self, profile_document):
        text = self._with_rpm_field(profile_document, StartPosition=0)
        with pytest.raises(InvalidProfile) as exc_info:
            LedProfile.from_json(text)
        assert "StartPosition" in exc_info.value.field

    @pytest.mark.unit
    def test_zero_start_position_of_unknown_container(self, profile_document):
        profile_document["LedContainers"][3]["StartPosition"] = 0
        with pytest.raises(InvalidProfile):
            LedProfile.from_json(json.dumps(profile_document))

    @pytest.mark.unit
    def test_unknown_rpm_mode(self, profile_document):
        profile_document["LedContainers"].append(
            {"ContainerType": "RPMSegmentsContainer", "RpmMode": 7, "Segments": []}
        )
        with pytest.raises(InvalidProfile) as exc_info:
            LedProfile.from_json(json.dumps(profile_document))
        assert "RpmMode" in exc_info.value.field

    @pytest.mark.unit
    def test_negative_duration(self, profile_document):
        text = self._with_rpm_field(profile_document, BlinkDelay=-5)
        with pytest.raises(InvalidProfile):
            LedProfile.from_json(text)

    @pytest.mark.unit
    def test_invalid_json(self):
        with pytest.raises(ProfileFileInvalidError):
            LedProfile.from_json('{"Name": "broken",')


class TestLoadProfile:
    """Test loading profiles from disk."""

    @pytest.mark.unit
    def test_load(self, profile_file):
        profile = load_profile(profile_file)
        assert profile.name == "GT3 wheel"
        assert len(profile.led_containers) == 4

    @pytest.mark.unit
    def test_load_with_byte_order_mark(self, temp_dir, profile_json):
        path = temp_dir / "bom.json"
        path.write_text("\ufeff" + profile_json, encoding="utf-8")
        assert load_profile(path).name == "GT3 wheel"

    @pytest.mark.unit
    def test_empty_file(self, temp_dir):
        path = temp_dir / "empty.json"
        path.write_text("  ", encoding="utf-8")
        with pytest.raises(ProfileFileInvalidError):
            load_profile(path)

    @pytest.mark.unit
    def test_errors_name_the_file(self, temp_dir, profile_document):
        profile_document["LedContainers"][0]["StartColor"] = "1,2,300"
        path = temp_dir / "bad.json"
        path.write_text(json.dumps(profile_document), encoding="utf-8")
        with pytest.raises(InvalidProfile) as exc_info:
            load_profile(path)
        assert exc_info.value.file_path == str(path)

    @pytest.mark.unit
    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_profile(temp_dir / "missing.json")
