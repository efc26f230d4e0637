################################################################################
# pymetencoder/synop/__init__.py
#
# SYNOP encoder module for pymetencoder
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import json, logging
import pymetencoder
from pymetencoder import code_tables as ct
from pymetencoder import conversion, lookup, is_missing
from . import observations as obs
from . import precipitation as prcp

# Section indicators
C1 = "1"
C2 = "2"

# Canonical order of the groups on the station entry form
GROUPS = [
    "c1",                     #  1. C1
    "station_id",             #  2. Iliii
    "cloud_base_visibility",  #  3. iRiXhvv
    "cloud_wind",             #  4. Nddff
    "air_temperature",        #  5. 1SnTTT
    "dewpoint_temperature",   #  6. 2SnTdTdTd
    "pressure",               #  7. 3PPP/4PPPP
    "precipitation",          #  8. 6RRRtR
    "weather",                #  9. 7wwW1W2
    "cloud_types",            # 10. 8NhClCmCh
    "extreme_temperature",    # 11. 2SnTnTnTn/1SnTxTxTx
    "cloud_drift_direction",  # 12. 56DlDmDh
    "cloud_elevation",        # 13. 57CDaEc
    "average_total_cloud",    # 14. N
    "c2",                     # 15. C2
    "hour",                   # 16. GG
    "pressure_change",        # 17. 58/59P24P24P24
    "precipitation_24h",      # 18. 6RRRtR/7R24R24R24
    "cloud_layers",           # 19. 8NsChshs
    "squall",                 # 20. 90dqqqt
    "humidity"                # 21. 91fqfqfq
]
REQUIRED = ["station_id", "obs_time"]
################################################################################
# REPORT CLASSES
################################################################################
class EncodedReport(object):
    """
    An encoded SYNOP. Each group is an attribute named in GROUPS; the
    positional list used by the entry form is available as measurements.
    Instances cannot be modified.
    """
    _HEADER = ["data_type", "station_no", "year", "month", "day", "weather_remark"]
    def __init__(self, **kwargs):
        missing = [x for x in self._HEADER + GROUPS if x not in kwargs]
        unknown = [x for x in kwargs if x not in self._HEADER + GROUPS]
        if len(missing) > 0 or len(unknown) > 0:
            raise TypeError("EncodedReport missing {} / unknown {}".format(missing, unknown))
        for k, v in kwargs.items():
            object.__setattr__(self, k, v)
    def __setattr__(self, name, value):
        raise AttributeError("EncodedReport is immutable")
    def __delattr__(self, name):
        raise AttributeError("EncodedReport is immutable")
    def __eq__(self, other):
        if not isinstance(other, EncodedReport):
            return NotImplemented
        return self.to_dict() == other.to_dict()
    def __hash__(self):
        return hash(tuple(getattr(self, x) for x in self._HEADER + GROUPS))
    def __repr__(self):
        return "EncodedReport({})".format(" ".join(x for x in self.measurements if x != ""))
    @property
    def measurements(self):
        """
        The groups in canonical order

        :rtype: list
        """
        return [getattr(self, x) for x in GROUPS]
    def to_dict(self):
        """
        Returns the report in the form used by the entry form
        """
        return {
            "dataType":      self.data_type,
            "stationNo":     self.station_no,
            "year":          self.year,
            "month":         self.month,
            "day":           self.day,
            "weatherRemark": self.weather_remark,
            "measurements":  self.measurements
        }
    def toJSON(self):
        return json.dumps(self, cls=pymetencoder.ObsEncoder)
class SYNOP(pymetencoder.Report):
    """
    Encodes an observation record into the 21 SYNOP groups of the station
    entry form

    :param string null_char: Character used for missing figures
    """
    def __init__(self, null_char="/"):
        self.null_char = null_char
    def _encode(self, data, **kwargs):
        """
        Encodes the SYNOP from data

        :param dict data: Observation record
        :param boolean strict: If True, raise UnencodableRecord if the station
            number or observation time is missing. Otherwise, defaults are used
        :param string data_type: Data type for the report header
        :returns: Encoded report
        :rtype: EncodedReport
        """
        strict = kwargs.get("strict", True)
        data_type = kwargs.get("data_type", "SYNOP")

        # Check the record can be encoded
        missing = [x for x in REQUIRED if is_missing(data.get(x))]
        obs_time = None
        if "obs_time" not in missing:
            try:
                obs_time = conversion.to_utc(data.get("obs_time"))
            except (ValueError, TypeError, AttributeError):
                logging.warning("Cannot read observation time {}".format(data.get("obs_time")))
                missing.append("obs_time")
        if len(missing) > 0:
            if strict:
                raise pymetencoder.UnencodableRecord(missing)
            logging.warning("Record is missing {}. Using defaults".format(", ".join(missing)))

        # Get the synoptic hour
        hour = obs.synoptic_hour(obs_time) if obs_time is not None else None
        n = self.null_char

        # Encode the groups
        precip = data.get("precipitation") or {}
        groups = {
            "c1":                    C1,
            "station_id":            obs.StationID(null_char=n).encode(data.get("station_id")),
            "cloud_base_visibility": obs.CloudBaseVisibility(null_char=n).encode(data),
            "cloud_wind":            obs.SurfaceWind(null_char=n).encode(data.get("wind"),
                                        group=obs.TotalCloud(null_char=n).encode(lookup(data, ("cloud", "total")))),
            "air_temperature":       obs.Temperature(null_char=n).encode(lookup(data, ("temperature", "dry_bulb")), group="1"),
            "dewpoint_temperature":  obs.DewPoint(null_char=n).encode(lookup(data, ("temperature", "dew_point")), group="2"),
            "pressure":              "{}/{}".format(
                                        obs.Pressure(null_char=n).encode(lookup(data, ("pressure", "station_level")), group="3"),
                                        obs.Pressure(null_char=n).encode(lookup(data, ("pressure", "sea_level")), group="4")),
            "precipitation":         prcp.Precipitation(null_char=n).encode(data.get("precipitation"), group="6", obs_time=obs_time),
            "weather":               obs.Weather(null_char=n).encode(data.get("weather"), group="7"),
            "cloud_types":           obs.CloudType(null_char=n).encode(data.get("cloud"), group="8"),
            "extreme_temperature":   obs.ExtremeTemperature(null_char=n).encode(lookup(data, ("temperature", "max_min")), hour=hour),
            "cloud_drift_direction": obs.CloudDriftDirection(null_char=n).encode(data.get("cloud"), group="56"),
            "cloud_elevation":       obs.CloudElevation(null_char=n).encode(data.get("cloud"), group="57"),
            "average_total_cloud":   obs.TotalCloud(null_char=n).encode(lookup(data, ("cloud", "total"))),
            "c2":                    C2,
            "hour":                  obs.ObservationHour(null_char=n).encode(obs_time),
            "pressure_change":       obs.PressureChange(null_char=n).encode(lookup(data, ("pressure", "change_24h"))),
            "cloud_layers":          obs.CloudLayer(null_char=n).encode(lookup(data, ("cloud", "significant"))),
            "squall":                obs.Squall(null_char=n).encode(data.get("squall"), group="90"),
            "humidity":              obs.RelativeHumidity(null_char=n).encode(lookup(data, ("temperature", "relative_humidity")), group="91")
        }

        # The 24 hour group is reported when the 24 hour amount was recorded.
        # Otherwise, the precipitation group is repeated
        if is_missing(precip.get("last_24h")):
            groups["precipitation_24h"] = groups["precipitation"]
        else:
            groups["precipitation_24h"] = prcp.Precipitation24(null_char=n).encode(precip["last_24h"], group="7")

        # Create the header
        present_weather = groups["weather"][1:3]
        return EncodedReport(
            data_type      = data_type,
            station_no     = groups["station_id"],
            year           = "{:04d}".format(obs_time.year) if obs_time is not None else "",
            month          = "{:02d}".format(obs_time.month) if obs_time is not None else "",
            day            = "{:02d}".format(obs_time.day) if obs_time is not None else "",
            weather_remark = ct.CodeTable4677().remark(present_weather),
            **groups
        )
################################################################################
# FUNCTIONS
################################################################################
def encode(data, **kwargs):
    """
    Encodes an observation record and returns the report in the form used by
    the entry form

    :param dict data: Observation record
    :rtype: dict
    """
    return SYNOP(null_char=kwargs.pop("null_char", "/")).encode(data, **kwargs).to_dict()
