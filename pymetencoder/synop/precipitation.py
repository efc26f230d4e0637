################################################################################
# pymetencoder/synop/precipitation.py
#
# Precipitation groups for SYNOPs, including the classification of the
# precipitation period (tr)
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import logging
from datetime import timedelta
from pymetencoder import Observation, InvalidCode, is_missing
from pymetencoder import conversion
################################################################################
# DECISION TABLES
################################################################################
# Intermittent precipitation is classified by the part of the six hours
# before the observation (H) in which it fell. Rules are tried in order.
INTERMITTENT_RULES = [
    # (tr, rule(window, start, end))
    ("1", lambda w, start, end: w.h6 <= start < w.h3 and end <= w.h3),  # H-6 to H-3
    ("2", lambda w, start, end: w.h3 <= start < w.h and end <= w.h),    # H-3 to H
    ("3", lambda w, start, end: start <= w.h6 and end >= w.h)           # H-6 to H
]

# Continuous precipitation is classified by its duration and the time since
# it ended, both in hours. Rules are tried in order; a duration band is
# (exclusive lower bound, inclusive upper bound).
CONTINUOUS_RULES = [
    # (tr, duration band, maximum hours since end)
    ("4", (None, 2), 2),
    ("5", (None, 2), 4),
    ("6", (None, 2), 6),
    ("7", (2, 4), 2),
    ("8", (2, 4), 4),
    ("9", (4, 6), 2)
]
################################################################################
# CLASSES
################################################################################
class Window(object):
    """
    The six hour period ending at the time of observation

    :param datetime obs_time: Time of observation (H)
    """
    def __init__(self, obs_time):
        self.h  = conversion.to_utc(obs_time)
        self.h3 = self.h - timedelta(hours=3)
        self.h6 = self.h - timedelta(hours=6)
    def contains(self, start, end):
        """
        True if the period from start to end lies within the window
        """
        return start >= self.h6 and end <= self.h
    def hours_since(self, t):
        """
        Hours from t to the time of observation. Negative values wrap to the
        previous day.
        """
        hours = conversion.hours_between(t, self.h)
        if hours < 0:
            hours += 24
        return hours
class DurationIndicator(Observation):
    """
    Period of precipitation

    * (6RRR)tr
      0    - precipitation amount reported, time unknown
      1-3  - intermittent precipitation in the first, second or both halves
             of the six hours before the observation
      4-9  - continuous precipitation, by duration and time since it ended
      /    - no precipitation, or period cannot be classified
    """
    _CODE_LEN = 1
    def _encode(self, data, **kwargs):
        obs_time = kwargs.get("obs_time")
        (start, end) = (data.get("start"), data.get("end"))

        # If no timing is known, only the amount determines tr
        if is_missing(start) or is_missing(end) or obs_time is None:
            amount = conversion.to_number(Precipitation.amount(data))
            return "0" if amount is not None and amount > 0 else self.null_char

        # Classify the period
        window = Window(obs_time)
        (start, end) = (conversion.to_utc(start), conversion.to_utc(end))
        if end < start:
            logging.warning("Precipitation ended ({}) before it started ({})".format(end, start))
            return self.null_char
        if data.get("intermittent", False):
            tr = self.classify_intermittent(window, start, end)
        else:
            tr = self.classify_continuous(window, start, end)
        logging.debug("Precipitation from {} to {} classified as tr={}".format(start, end, tr))
        return tr if tr is not None else self.null_char
    def classify_intermittent(self, window, start, end):
        """
        Returns tr for intermittent precipitation, or None if unclassifiable
        """
        for (tr, rule) in INTERMITTENT_RULES:
            if rule(window, start, end):
                return tr
        return None
    def classify_continuous(self, window, start, end):
        """
        Returns tr for continuous precipitation, or None if unclassifiable
        """
        if not window.contains(start, end):
            return None
        duration = conversion.hours_between(start, end)
        since_end = window.hours_since(end)
        for (tr, (low, high), max_since) in CONTINUOUS_RULES:
            if (low is None or duration > low) and duration <= high and since_end <= max_since:
                return tr
        return None
class Precipitation(Observation):
    """
    Precipitation

    * 6RRRtr - amount in whole mm and period of precipitation
    """
    _CODE_LEN = 4
    def __init__(self, null_char="/"):
        super().__init__(null_char=null_char)
        self._ENCODE_DEFAULT = "000{}".format(null_char)
    def _encode(self, data, **kwargs):
        return "{RRR}{tr}".format(
            RRR = self.Amount(null_char=self.null_char).encode(self.amount(data)),
            tr  = DurationIndicator(null_char=self.null_char).encode(data, obs_time=kwargs.get("obs_time"))
        )
    @staticmethod
    def amount(data):
        """
        Returns the amount since the previous report, or the 24 hour amount if
        that is all that was recorded
        """
        if not is_missing(data.get("since_previous")):
            return data.get("since_previous")
        return data.get("last_24h")
    class Amount(Observation):
        """
        Last three figures of the amount in whole mm
        """
        _CODE_LEN = 3
        _ENCODE_DEFAULT = "000"
        def _encode(self, data, **kwargs):
            val = conversion.to_number(data)
            if val is None or val < 0:
                raise InvalidCode(data, "precipitation amount")
            return conversion.last_digits(conversion.round_half_up(val), self._CODE_LEN)
class Precipitation24(Observation):
    """
    Precipitation over the last 24 hours

    * 7R24R24R24R24 - amount in tenths of mm
    """
    _CODE_LEN = 4
    def _encode(self, data, **kwargs):
        val = conversion.to_number(data)
        if val is None or val < 0:
            raise InvalidCode(data, "24 hour precipitation amount")
        return conversion.last_digits(conversion.round_half_up(val * 10), self._CODE_LEN)
