"""
National subdivisions - US states, Canadian provinces and Mexican states.

Addresses hold a NationalSubdivision; the enums below are the closed lists
each address variant converts from.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class NationalSubdivision:
    name: str | None = None
    abbreviation: str | None = None

    def __str__(self) -> str:
        return self.abbreviation or self.name or "Unknown"


class _Subdivision(str, Enum):
    """Members are keyed by abbreviation and carry their display name."""

    def __new__(cls, display_name: str, abbreviation: str):
        obj = str.__new__(cls, abbreviation)
        obj._value_ = abbreviation
        obj.display_name = display_name
        return obj

    @property
    def abbreviation(self) -> str:
        return self.value

    def to_subdivision(self) -> NationalSubdivision:
        return NationalSubdivision(name=self.display_name, abbreviation=self.abbreviation)


class USState(_Subdivision):
    ALABAMA = ("Alabama", "AL")
    ALASKA = ("Alaska", "AK")
    ARIZONA = ("Arizona", "AZ")
    ARKANSAS = ("Arkansas", "AR")
    CALIFORNIA = ("California", "CA")
    COLORADO = ("Colorado", "CO")
    CONNECTICUT = ("Connecticut", "CT")
    DELAWARE = ("Delaware", "DE")
    FLORIDA = ("Florida", "FL")
    GEORGIA = ("Georgia", "GA")
    HAWAII = ("Hawaii", "HI")
    IDAHO = ("Idaho", "ID")
    ILLINOIS = ("Illinois", "IL")
    INDIANA = ("Indiana", "IN")
    IOWA = ("Iowa", "IA")
    KANSAS = ("Kansas", "KS")
    KENTUCKY = ("Kentucky", "KY")
    LOUISIANA = ("Louisiana", "LA")
    MAINE = ("Maine", "ME")
    MARYLAND = ("Maryland", "MD")
    MASSACHUSETTS = ("Massachusetts", "MA")
    MICHIGAN = ("Michigan", "MI")
    MINNESOTA = ("Minnesota", "MN")
    MISSISSIPPI = ("Mississippi", "MS")
    MISSOURI = ("Missouri", "MO")
    MONTANA = ("Montana", "MT")
    NEBRASKA = ("Nebraska", "NE")
    NEVADA = ("Nevada", "NV")
    NEW_HAMPSHIRE = ("New Hampshire", "NH")
    NEW_JERSEY = ("New Jersey", "NJ")
    NEW_MEXICO = ("New Mexico", "NM")
    NEW_YORK = ("New York", "NY")
    NORTH_CAROLINA = ("North Carolina", "NC")
    NORTH_DAKOTA = ("North Dakota", "ND")
    OHIO = ("Ohio", "OH")
    OKLAHOMA = ("Oklahoma", "OK")
    OREGON = ("Oregon", "OR")
    PENNSYLVANIA = ("Pennsylvania", "PA")
    RHODE_ISLAND = ("Rhode Island", "RI")
    SOUTH_CAROLINA = ("South Carolina", "SC")
    SOUTH_DAKOTA = ("South Dakota", "SD")
    TENNESSEE = ("Tennessee", "TN")
    TEXAS = ("Texas", "TX")
    UTAH = ("Utah", "UT")
    VERMONT = ("Vermont", "VT")
    VIRGINIA = ("Virginia", "VA")
    WASHINGTON = ("Washington", "WA")
    WEST_VIRGINIA = ("West Virginia", "WV")
    WISCONSIN = ("Wisconsin", "WI")
    WYOMING = ("Wyoming", "WY")


class CAProvince(_Subdivision):
    ALBERTA = ("Alberta", "AB")
    BRITISH_COLUMBIA = ("British Columbia", "BC")
    MANITOBA = ("Manitoba", "MB")
    NEW_BRUNSWICK = ("New Brunswick", "NB")
    NEWFOUNDLAND_AND_LABRADOR = ("Newfoundland and Labrador", "NL")
    NOVA_SCOTIA = ("Nova Scotia", "NS")
    ONTARIO = ("Ontario", "ON")
    PRINCE_EDWARD_ISLAND = ("Prince Edward Island", "PE")
    QUEBEC = ("Quebec", "QC")
    SASKATCHEWAN = ("Saskatchewan", "SK")
    NORTHWEST_TERRITORIES = ("Northwest Territories", "NT")
    NUNAVUT = ("Nunavut", "NU")
    YUKON = ("Yukon", "YT")


class MXState(_Subdivision):
    AGUASCALIENTES = ("Aguascalientes", "AG")
    BAJA_CALIFORNIA = ("Baja California", "BC")
    BAJA_CALIFORNIA_SUR = ("Baja California Sur", "BS")
    CAMPECHE = ("Campeche", "CM")
    CHIAPAS = ("Chiapas", "CS")
    CHIHUAHUA = ("Chihuahua", "CH")
    COAHUILA_DE_ZARAGOZA = ("Coahuila de Zaragoza", "CO")
    COLIMA = ("Colima", "CL")
    DURANGO = ("Durango", "DG")
    GUANAJUATO = ("Guanajuato", "GT")
    GUERRERO = ("Guerrero", "GR")
    HIDALGO = ("Hidalgo", "HG")
    JALISCO = ("Jalisco", "JA")
    MEXICO = ("México", "MX")
    CIUDAD_DE_MEXICO = ("Ciudad de México", "DF")
    MICHOACAN_DE_OCAMPO = ("Michoacán de Ocampo", "MI")
    MORELOS = ("Morelos", "MO")
    NAYARIT = ("Nayarit", "NA")
    NUEVO_LEON = ("Nuevo León", "NL")
    OAXACA = ("Oaxaca", "OA")
    PUEBLA = ("Puebla", "PU")
    QUERETARO = ("Querétaro", "QT")
    QUINTANA_ROO = ("Quintana Roo", "QR")
    SAN_LUIS_POTOSI = ("San Luis Potosí", "SL")
    SINALOA = ("Sinaloa", "SI")
    SONORA = ("Sonora", "SO")
    TABASCO = ("Tabasco", "TB")
    TAMAULIPAS = ("Tamaulipas", "TM")
    TLAXCALA = ("Tlaxcala", "TL")
    VERACRUZ_DE_IGNACIO_DE_LA_LLAVE = ("Veracruz de Ignacio de la Llave", "VZ")
    YUCATAN = ("Yucatán", "YU")
    ZACATECAS = ("Zacatecas", "ZA")
