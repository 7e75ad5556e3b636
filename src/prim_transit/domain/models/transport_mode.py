"""Transport mode domain model."""

from enum import StrEnum


class TransportMode(StrEnum):
    """Transit mode of a line, as shown on the dashboard."""

    METRO = "Metro"
    RER = "RER"
    TRAMWAY = "Tramway"
    BUS = "Bus"
    TRANSILIEN = "Transilien"

    @property
    def physical_mode(self) -> str:
        """Navitia physical mode identifier for this mode."""
        return _PHYSICAL_MODES[self]

    @classmethod
    def from_physical_mode(cls, physical_mode_id: str) -> "TransportMode | None":
        """Resolve a Navitia physical mode id (e.g. "physical_mode:RapidTransit")."""
        for mode, physical_mode in _PHYSICAL_MODES.items():
            if physical_mode in physical_mode_id:
                return mode
        return None


_PHYSICAL_MODES: dict[TransportMode, str] = {
    TransportMode.METRO: "Metro",
    TransportMode.RER: "RapidTransit",
    TransportMode.TRAMWAY: "Tramway",
    TransportMode.TRANSILIEN: "LocalTrain",
    TransportMode.BUS: "Bus",
}
