"""Pytest fixtures for tests."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, start_ms: int = 0):
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms * 1_000_000

    def advance(self, milliseconds: int) -> None:
        self.now_ms += milliseconds


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def profile_document():
    """A profile in the upstream PascalCase format."""
    return {
        "Name": "GT3 wheel",
        "ProfileId": "5d1f3c52-7a42-4b6e-9a57-0f2c8f3e6a11",
        "GlobalBrightness": 0.8,
        "UseProfileBrightness": True,
        "AutomaticSwitch": False,
        "GameCode": "AssettoCorsaCompetizione",
        "LedContainers": [
            {
                "ContainerType": "SimHub.Plugins.OutputPlugins.GraphicalDash.LedContainers.RPMContainer",
                "Description": "Shift lights",
                "IsEnabled": True,
                "StartPosition": 1,
                "LedCount": 5,
                "UsePercent": True,
                "PercentMin": 85,
                "PercentMax": 95,
                "RPMMin": 0,
                "RPMMax": 0,
                "StartColor": "Lime",
                "EndColor": "Red",
                "RightToLeft": False,
                "BlinkEnabled": False,
                "BlinkDelay": 100,
                "BlinkOnLastGear": False,
                "GradientOnAll": False,
                "FillAllLeds": False,
            },
            {
                "ContainerType": "SimHub.Plugins.OutputPlugins.GraphicalDash.LedContainers.GroupContainer",
                "Description": "Flags",
                "IsEnabled": True,
                "StartPosition": 6,
                "StackLeftToRight": True,
                "LedContainers": [
                    {
                        "ContainerType": "SimHub.Plugins.OutputPlugins.GraphicalDash.LedContainers.YellowFlagContainer",
                        "IsEnabled": True,
                        "StartPosition": 1,
                        "LedCount": 3,
                        "Color": "#FFFF00",
                        "BlinkEnabled": False,
                        "BlinkDelay": 50,
                    },
                    {
                        "ContainerType": "SimHub.Plugins.OutputPlugins.GraphicalDash.LedContainers.BlueFlagContainer",
                        "IsEnabled": False,
                        "StartPosition": 1,
                        "LedCount": 2,
                        "Color": "0,0,255",
                        "BlinkEnabled": False,
                    },
                    {
                        "ContainerType": "SimHub.Plugins.OutputPlugins.GraphicalDash.LedContainers.WhiteFlagContainer",
                        "IsEnabled": True,
                        "StartPosition": 1,
                        "LedCount": 2,
                        "Color": "White",
                        "BlinkEnabled": False,
                    },
                ],
            },
            {
                "ContainerType": "SimHub.Plugins.OutputPlugins.GraphicalDash.LedContainers.SpeedLimiterAnimationContainer",
                "IsEnabled": True,
                "StartPosition": 1,
                "LedCount": 10,
            },
            {
                "ContainerType": "SimHub.Plugins.OutputPlugins.GraphicalDash.LedContainers.TyreTemperatureContainer",
                "IsEnabled": True,
                "StartPosition": 12,
                "Sensitivity": 3,
            },
        ],
    }


@pytest.fixture
def profile_json(profile_document):
    return json.dumps(profile_document)


@pytest.fixture
def profile_file(temp_dir, profile_json):
    path = temp_dir / "gt3.json"
    path.write_text(profile_json, encoding="utf-8")
    return path
