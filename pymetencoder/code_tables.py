################################################################################
# pymetencoder/code_tables.py
#
# Code tables for encoding SYNOPs
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import logging
from types import MappingProxyType
import pymetencoder
################################################################################
# BASE CLASSES
################################################################################
class CodeTable(object):
    """
    Base class for code table object
    """
    def decode(self, value, **kwargs):
        """
        Looks up a code and returns its meaning
        """
        try:
            out_val = self._decode(value, **kwargs)
            if out_val is None:
                return None
            return { "_table": self._TABLE, **out_val }
        except (ValueError, KeyError, IndexError):
            logging.warning("{} is not a valid code for code table {}".format(value, self._TABLE))
            return None
    def encode(self, value, **kwargs):
        """
        Encodes a value into its code
        """
        if value is None:
            return None
        return self._encode(value, **kwargs)
    def _decode(self, raw, **kwargs):
        """
        Actual decode function. Implement in subclass
        """
        raise NotImplementedError("_decode needs to be implemented for {}".format(type(self).__name__))
    def _encode(self, raw, **kwargs):
        """
        Actual encode function. Implement in subclass
        """
        raise NotImplementedError("_encode needs to be implemented for {}".format(type(self).__name__))
################################################################################
# CODE TABLE CLASSES
################################################################################
class CodeTable0877(CodeTable):
    """
    True direction, in tens of degrees, from which wind is blowing
    """
    _TABLE = "0877"
    def _encode(self, data):
        if data.get("calm", False):
            return 0
        val = data["value"]
        if not 0 <= val <= 360:
            raise pymetencoder.InvalidCode(val, "wind direction in code table 0877")
        if val >= 355:
            return 36
        return int((val + 5) // 10)
class CodeTable4677(CodeTable):
    """
    Present weather reported from a manned station. Each code has a remark
    (symbol and description) shown alongside the report.
    """
    _TABLE = "4677"
    _DEFAULT_REMARK = ("/remarks/default.png", "No remark available for this weather code")
    _REMARKS = MappingProxyType({
    "00": ("/remarks/1.png", "Cloud development not observed or not observable during past hour"),
    "01": ("/remarks/2.png", "Clouds generally dissolving or becoming less developed during past hour"),
    "02": ("/remarks/3.png", "State of sky on the whole unchanged during past hour"),
    "03": ("/remarks/4.png", "Clouds generally forming or developing during past hour"),
    "04": ("/remarks/5.png", "Visibility reduced by smoke"),
    "05": ("/remarks/6.png", "Haze"),
    "06": ("/remarks/7.png", "Widespread dust in suspension in the air, not raised by wind at time of observation"),
    "07": ("/remarks/8.png", "Dust or sand raised by wind at time of observation"),
    "08": ("/remarks/9.png", "Well developed dust devil(s) within past hour"),
    "09": ("/remarks/10.png", "Duststorm or sandstorm within sight of station or at station during past hour"),
    "10": ("/remarks/11.png", "Light fog (BR)"),
    "11": ("/remarks/12.png", "Patches of shallow fog at station not deeper than 6 feet on land"),
    "12": ("/remarks/13.png", "More or less continuous shallow fog at station not deeper than 6 feet on land (MIFG)"),
    "13": ("/remarks/14.png", "Lightning visible, no thunder heard (VCTS)"),
    "14": ("/remarks/15.png", "Precipitation within sight, but not reaching the ground (VIRGA)"),
    "15": ("/remarks/16.png", "Precipitation within sight, reaching ground, but distant from station"),
    "16": ("/remarks/17.png", "Precipitation within sight, reaching the ground, near to but not at station (VCSH)"),
    "17": ("/remarks/18.png", "Thunder heard but no precipitation at the station"),
    "18": ("/remarks/19.png", "Squall(s) within sight during past hour (SQ)"),
    "19": ("/remarks/20.png", "Funnel cloud(s) within sight during past hour (FU/+FC)"),
    "20": ("/remarks/21.png", "Drizzle (not freezing, not showers) during past hour, not at time of obs"),
    "21": ("/remarks/22.png", "Rain (not freezing, not showers) during past hour, not at time of obs"),
    "22": ("/remarks/23.png", "Snow (not falling as showers) during past hour, not at time of obs"),
    "23": ("/remarks/24.png", "Rain and snow (not showers) during past hour, not at time of obs"),
    "24": ("/remarks/25.png", "Freezing drizzle or rain (not showers) during past hour, not at time of obs"),
    "25": ("/remarks/26.png", "Showers of rain during past hour, but not at time of obs"),
    "26": ("/remarks/27.png", "Showers of snow, or of rain and snow during past hour, but not at time of obs"),
    "27": ("/remarks/28.png", "Showers of hail, or of hail and rain during past hour, but not at time of obs"),
    "28": ("/remarks/29.png", "Fog during past hour, but not at time of obs"),
    "29": ("/remarks/30.png", "Thunderstorm (with or without precip) during past hour, but not at time of obs"),
    "30": ("/remarks/31.png", "Slight or moderate duststorm or sandstorm, has decreased during past hour"),
    "31": ("/remarks/32.png", "Slight or moderate duststorm or sandstorm, no appreciable change during past hour"),
    "32": ("/remarks/33.png", "Slight or moderate duststorm or sandstorm, has increased during past hour"),
    "33": ("/remarks/34.png", "Severe duststorm or sandstorm, has decreased during past hour"),
    "34": ("/remarks/35.png", "Severe duststorm or sandstorm, no appreciable change during past hour"),
    "35": ("/remarks/36.png", "Severe duststorm or sandstorm, has increased during past hour"),
    "36": ("/remarks/37.png", "Slight or moderate drifting snow, generally low"),
    "37": ("/remarks/38.png", "Heavy drifting snow, generally low"),
    "38": ("/remarks/39.png", "Slight or moderate drifting snow, generally high"),
    "39": ("/remarks/40.png", "Heavy drifting snow, generally high"),
    "40": ("/remarks/41.png", "Fog at distance at time of obs but not at station during past hour (VCFG)"),
    "41": ("/remarks/42.png", "Fog in patches (BCFG)"),
    "42": ("/remarks/43.png", "Fog, sky discernable, has become thinner during past hour (PRFG)"),
    "43": ("/remarks/44.png", "Fog, sky not discernable, has become thinner during past hour"),
    "44": ("/remarks/45.png", "Fog, sky discernable, no appreciable change during past hour"),
    "45": ("/remarks/46.png", "Fog, sky not discernable, no appreciable change during past hour (FG)"),
    "46": ("/remarks/47.png", "Fog, sky discernable, has begun or become thicker during past hour"),
    "47": ("/remarks/48.png", "Fog, sky not discernable, has begun or become thicker during past hour"),
    "48": ("/remarks/49.png", "Fog, depositing rime, sky discernable"),
    "49": ("/remarks/50.png", "Fog, depositing rime, sky not discernable (FZFG)"),
    "50": ("/remarks/51.png", "Intermittent drizzle (not freezing), slight at time of obs"),
    "51": ("/remarks/52.png", "Continuous drizzle (not freezing), slight at time of obs (-DZ)"),
    "52": ("/remarks/53.png", "Intermittent drizzle (not freezing), moderate at time of obs"),
    "53": ("/remarks/54.png", "Continuous drizzle (not freezing), moderate at time of obs (DZ)"),
    "54": ("/remarks/55.png", "Intermittent drizzle (not freezing), thick at time of obs"),
    "55": ("/remarks/56.png", "Continuous drizzle (not freezing), thick at time of obs (+DZ)"),
    "56": ("/remarks/57.png", "Slight freezing drizzle (-FZDZ)"),
    "57": ("/remarks/58.png", "Moderate or thick freezing drizzle (FZDZ)"),
    "58": ("/remarks/59.png", "Drizzle and rain, slight or moderate (-DZRA; -DZ RA; -DZR -RA)"),
    "59": ("/remarks/60.png", "Drizzle and rain, moderate or heavy (DZRA; +DZRA; DZ +RA; DZRA)"),
    "60": ("/remarks/61.png", "Intermittent rain (not freezing), slight at time of obs"),
    "61": ("/remarks/62.png", "Continuous rain (not freezing), slight at time of obs (-RA)"),
    "62": ("/remarks/63.png", "Intermittent rain (not freezing), moderate at time of obs"),
    "63": ("/remarks/64.png", "Continuous rain (not freezing), moderate at time of obs (RA)"),
    "64": ("/remarks/65.png", "Intermittent rain (not freezing), heavy at time of obs"),
    "65": ("/remarks/66.png", "Continuous rain (not freezing), heavy at time of obs (+RA)"),
    "66": ("/remarks/67.png", "Slight freezing rain (-FZRA)"),
    "67": ("/remarks/68.png", "Moderate or heavy freezing rain (FZRA)"),
    "68": ("/remarks/69.png", "Rain or drizzle and snow, slight (-RN -SN; -RA SN; -DZ SN; RA -SN; DZ -SN)"),
    "69": ("/remarks/70.png", "Rain or drizzle and snow, moderate or heavy (RA SN; DZ SN; RA +SN; +RA SN; +DZ SN)"),
    "70": ("/remarks/71.png", "Intermittent fall of snowflakes, slight or moderate at time of obs"),
    "71": ("/remarks/72.png", "Continuous fall of snowflakes, slight at time of obs"),
    "72": ("/remarks/73.png", "Intermittent fall of snowflakes, moderate at time of obs"),
    "73": ("/remarks/74.png", "Continuous fall of snowflakes, moderate at time of obs"),
    "74": ("/remarks/75.png", "Intermittent fall of snowflakes, heavy at time of obs"),
    "75": ("/remarks/76.png", "Continuous fall of snowflakes, heavy at time of obs"),
    "76": ("/remarks/77.png", "Ice pellets, with or without rain at time of obs"),
    "77": ("/remarks/78.png", "Snow grains or snow crystals with or without rain"),
    "78": ("/remarks/79.png", "Slight shower(s) of snow or small hail"),
    "79": ("/remarks/80.png", "Moderate or heavy shower(s) of snow or small hail"),
    "80": ("/remarks/81.png", "Slight rain shower(s)"),
    "81": ("/remarks/82.png", "Moderate or heavy rain shower(s)"),
    "82": ("/remarks/83.png", "Violent rain shower(s)"),
    "83": ("/remarks/84.png", "Slight shower(s) of rain and snow mixed"),
    "84": ("/remarks/85.png", "Moderate or heavy shower(s) of rain and snow"),
    "85": ("/remarks/86.png", "Slight snow shower(s)"),
    "86": ("/remarks/87.png", "Moderate or heavy snow shower(s)"),
    "87": ("/remarks/88.png", "Slight shower(s) of snow or small hail with or without rain"),
    "88": ("/remarks/89.png", "Moderate or heavy shower(s) of snow or small hail"),
    "89": ("/remarks/90.png", "Slight shower(s) of ice pellets, sleet, or hail"),
    "90": ("/remarks/91.png", "Thunderstorm without precipitation at time of obs"),
    "91": ("/remarks/92.png", "Thunderstorm with rain at time of obs"),
    "92": ("/remarks/93.png", "Thunderstorm with hail at time of obs"),
    "93": ("/remarks/94.png", "Slight thunderstorm with rain at time of obs"),
    "94": ("/remarks/95.png", "Moderate or heavy thunderstorm with rain at time of obs"),
    "95": ("/remarks/96.png", "Heavy thunderstorm with hail at time of obs"),
    "96": ("/remarks/97.png", "Slight or moderate thunderstorm with rain or hail but not at time of obs"),
    "97": ("/remarks/98.png", "Moderate or heavy thunderstorm with rain and hail, but not at time of obs"),
    "98": ("/remarks/99.png", "Thunderstorm with rain and strong wind at time of obs"),
    "99": ("/remarks/99.png", "Heavy thunderstorm with hail, not at time of obs"),
    })
    def _decode(self, ww):
        ww = "{:02d}".format(int(ww))
        (symbol, description) = self._REMARKS[ww]
        return { "value": int(ww), "symbol": symbol, "description": description }
    def remark(self, ww):
        """
        Returns the weather remark for a present weather code, formatted as
        "<symbol> - <description>"

        :param string ww: Present weather code
        :rtype: string
        """
        (symbol, description) = self._DEFAULT_REMARK
        data = self.decode(ww) if ww is not None else None
        if data is not None:
            (symbol, description) = (data["symbol"], data["description"])
        return "{} - {}".format(symbol, description)
