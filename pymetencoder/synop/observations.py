################################################################################
# pymetencoder/synop/observations.py
#
# Observation classes for the SYNOP groups of the station entry form
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import logging
from pymetencoder import Observation, InvalidCode, lookup, is_missing
from pymetencoder import code_tables as ct
from pymetencoder import conversion
################################################################################
# SHARED CLASSES
################################################################################
class SimpleCode(Observation):
    """
    Single figure code, entered by the observer
    """
    _CODE_LEN = 1
    _VALID_RANGE = (0, 9)
    _ENCODE_DEFAULT = "0"
class CloudCover(SimpleCode):
    """
    Cloud amount in oktas (9 = sky obscured)
    """
class CloudGenus(SimpleCode):
    """
    Cloud form
    """
class DirectionCardinal(SimpleCode):
    """
    Direction in one figure (code table 0700)
    """
class Height(Observation):
    """
    Height of a cloud layer in two figures
    """
    _CODE_LEN = 2
    _VALID_RANGE = (0, 99)
    _ENCODE_DEFAULT = "00"
################################################################################
# HEADER CLASSES
################################################################################
SYNOPTIC_HOURS = (0, 3, 6, 9, 12, 15, 18, 21)
def synoptic_hour(obs_time):
    """
    Returns the synoptic hour for an observation time, i.e. the UTC hour
    rounded down to the 3-hourly schedule

    :param datetime obs_time: Time of observation
    :rtype: int
    """
    hour = conversion.to_utc(obs_time).hour
    return max(h for h in SYNOPTIC_HOURS if h <= hour)
class StationID(Observation):
    """
    Station ID

    * Iliii - block number and station number, as registered
    """
    _CODE_LEN = 5
    _ENCODE_DEFAULT = "00000"
    def _encode(self, data, **kwargs):
        return str(data).strip()
class ObservationHour(Observation):
    """
    Hour of observation

    * GG - synoptic hour of the observation
    """
    _CODE_LEN = 2
    _ENCODE_DEFAULT = "00"
    def _encode(self, data, **kwargs):
        return "{:02d}".format(synoptic_hour(data))
################################################################################
# OTHER CLASSES
################################################################################
class CloudBaseVisibility(Observation):
    """
    Precipitation/weather indicators, lowest cloud base and visibility

    * iRixhVV - iRix are always reported as 32 by the station network
    """
    _CODE_LEN = 5
    _ENCODE_DEFAULT = "32000"
    def _encode(self, data, **kwargs):
        return "32{h}{VV}".format(
            h  = SimpleCode(null_char=self.null_char).encode(lookup(data, ("cloud", "low", "height"))),
            VV = self.Visibility(null_char=self.null_char).encode(lookup(data, "visibility"))
        )
    class Visibility(Observation):
        """
        Visibility is coded from the first figure of the value as read
        """
        _CODE_LEN = 2
        _ENCODE_DEFAULT = "00"
        def _encode(self, data, **kwargs):
            first = str(data).strip()[0]
            return conversion.zero_pad((int(first) if first.isdigit() else 0) * 10, self._CODE_LEN)
class CloudDriftDirection(Observation):
    """
    Direction of cloud drift

    * 56DLDMDH
    """
    _CODE_LEN = 3
    _ENCODE_DEFAULT = "000"
    _COMPONENTS = [
        (("low", "direction"), DirectionCardinal),
        (("medium", "direction"), DirectionCardinal),
        (("high", "direction"), DirectionCardinal)
    ]
class CloudElevation(Observation):
    """
    Form of the first significant cloud layer and direction of low cloud

    * 57CDaeC
    """
    _CODE_LEN = 3
    _ENCODE_DEFAULT = "000"
    _COMPONENTS = [
        (("significant", 0, "form"), CloudGenus),
        (("low", "direction"), DirectionCardinal),
        (("significant", 0, "form"), CloudGenus)
    ]
class CloudLayer(Observation):
    """
    Layers/masses of significant cloud

    * 8NsChshs - repeated for up to four layers, joined with " / "

    Layers without amount, form or height are left out rather than filled
    with zeros.
    """
    _CODE_LEN = 4
    _ENCODE_DEFAULT = ""
    _MAX_LAYERS = 4
    def _encode(self, data, **kwargs):
        if len(data) > self._MAX_LAYERS:
            logging.warning("{} significant cloud layers given, only the first {} are encoded".format(len(data), self._MAX_LAYERS))
        output = []
        for d in data[:self._MAX_LAYERS]:
            if d is None or all(is_missing(d.get(x)) for x in ["amount", "form", "height"]):
                continue
            output.append("8{N}{C}{hh}".format(
                N  = CloudCover(null_char=self.null_char).encode(d.get("amount")),
                C  = CloudGenus(null_char=self.null_char).encode(d.get("form")),
                hh = Height(null_char=self.null_char).encode(d.get("height"))
            ))
        return " / ".join(output)
class CloudType(Observation):
    """
    Cloud types/amount

    * 8NhCLCMCH
    """
    _CODE_LEN = 4
    _ENCODE_DEFAULT = "0000"
    _COMPONENTS = [
        (("low", "amount"), CloudCover),
        (("low", "form"), CloudGenus),
        (("medium", "form"), CloudGenus),
        (("high", "form"), CloudGenus)
    ]
class DewPoint(Observation):
    """
    Dewpoint temperature

    * 2SnTdTdTd

    The dewpoint is entered in degrees. A trailing "0" on the value as read is
    dropped before it is converted (e.g. "24.50" is read as 24.5).
    """
    _CODE_LEN = 4
    _ENCODE_DEFAULT = "0000"
    def _encode(self, data, **kwargs):
        raw = str(data).strip()
        if raw.endswith("0"):
            raw = raw[:-1]
        val = conversion.to_number(raw)
        if val is None:
            raise InvalidCode(data, "dewpoint temperature")
        return conversion.sign_magnitude(val)
class ExtremeTemperature(Observation):
    """
    Minimum or maximum temperature

    * 2SnTnTnTn - minimum temperature, reported at 00 and 03 UTC
    * 1SnTxTxTx - maximum temperature, reported at 09 and 12 UTC

    At other hours the group is left empty.
    """
    _CODE_LEN = 4
    _ENCODE_DEFAULT = "0000"
    _PREFIXES = { 0: "2", 3: "2", 9: "1", 12: "1" }
    def encode(self, raw, **kwargs):
        hour = kwargs.pop("hour", None)
        if hour not in self._PREFIXES:
            logging.info("No maximum/minimum temperature group at hour {}".format(hour))
            return ""
        return super().encode(raw, group=self._PREFIXES[hour], **kwargs)
    def _encode(self, data, **kwargs):
        return Temperature(null_char=self.null_char).encode(data)
class PressureChange(Observation):
    """
    Change of surface pressure over the last 24 hours

    * 58PPP - pressure has risen (or not changed)
    * 59PPP - pressure has fallen
    """
    _CODE_LEN = 5
    _ENCODE_DEFAULT = "58000"
    def _encode(self, data, **kwargs):
        val = conversion.to_number(data)
        if val is None:
            raise InvalidCode(data, "pressure change")
        return "{}{}".format(
            "58" if val >= 0 else "59",
            conversion.last_digits(data, 3)
        )
class Pressure(Observation):
    """
    Pressure

    * 3PPPP - Station level pressure
    * 4PPPP - Sea level pressure

    The last four figures of the pressure in tenths of hPa are reported.
    """
    _CODE_LEN = 4
    _ENCODE_DEFAULT = "0000"
    def _encode(self, data, **kwargs):
        if conversion.to_number(data) is None:
            raise InvalidCode(data, "pressure")
        return conversion.last_digits(data, self._CODE_LEN)
class RelativeHumidity(Observation):
    """
    Relative humidity

    * 91UUU
    """
    _CODE_LEN = 3
    _VALID_RANGE = (0, 100)
    _ENCODE_DEFAULT = "000"
class Squall(Observation):
    """
    Squall direction and time

    * 90dqqqt - direction and time are reported as entered
    """
    _CODE_LEN = 3
    def __init__(self, null_char="/"):
        super().__init__(null_char=null_char)
        self._ENCODE_DEFAULT = "{n}0{n}".format(n=null_char)
    def _encode(self, data, **kwargs):
        (direction, time) = (data.get("direction"), data.get("time"))
        return "{d}0{t}".format(
            d = self.null_char if is_missing(direction) else str(direction).strip(),
            t = self.null_char if is_missing(time) else str(time).strip()
        )
class SurfaceWind(Observation):
    """
    Surface wind

    * (N)ddff - Surface wind direction and speed

    Speeds of 100 knots or more add 50 to the direction code and report the
    speed less 100.
    """
    _CODE_LEN = 4
    _ENCODE_DEFAULT = "0000"
    def _encode(self, data, **kwargs):
        speed = self.Speed().knots(data.get("speed"))
        direction = conversion.to_number(data.get("direction"))

        # Direction code is determined before the speed is reduced
        dd = ct.CodeTable0877().encode({
            "value": direction if direction is not None else 0,
            "calm":  speed == 0
        })
        if speed >= 100:
            (dd, ff) = (dd + 50, speed - 100)
        else:
            ff = speed
        if ff > 99:
            raise InvalidCode(speed, "surface wind speed")
        return "{:02d}{:02d}".format(dd, ff)
    class Speed(Observation):
        _CODE_LEN = 2
        _UNIT = "KT"
        def knots(self, data):
            """
            Returns the wind speed in whole knots (0 if not available)
            """
            if not self.is_available(data):
                return 0
            if isinstance(data, dict):
                (val, unit) = (conversion.to_number(data["value"]), data.get("unit", self._UNIT))
            else:
                (val, unit) = (conversion.to_number(data), self._UNIT)
            if val is None:
                raise InvalidCode(data, "surface wind speed")
            val = conversion.convert(val, unit, self._UNIT, "speed")
            if val < 0:
                raise InvalidCode(data, "surface wind speed")
            return conversion.round_half_up(val)
class Temperature(Observation):
    """
    Temperature observation

    * 1SnTTT - air temperature
    * 2SnTnTnTn/1SnTxTxTx - minimum/maximum temperature

    Values are entered as read, in tenths of a degree.
    """
    _CODE_LEN = 4
    _ENCODE_DEFAULT = "0000"
    def _encode(self, data, **kwargs):
        val = conversion.to_number(data["value"] if isinstance(data, dict) else data)
        if val is None:
            raise InvalidCode(data, "temperature")
        return conversion.sign_magnitude(val / 10)
class TotalCloud(SimpleCode):
    """
    Total cloud cover

    * N(ddff)
    """
class Weather(Observation):
    """
    Present and past weather

    * 7wwW1W2
    """
    _CODE_LEN = 4
    _ENCODE_DEFAULT = "0000"
    class PresentWeather(Observation):
        _CODE_LEN = 2
        _VALID_RANGE = (0, 99)
        _ENCODE_DEFAULT = "00"
    class PastWeather(SimpleCode):
        pass
    _COMPONENTS = [
        ("present", PresentWeather),
        ("past_1", PastWeather),
        ("past_2", PastWeather)
    ]
