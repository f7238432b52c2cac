"""Month and day-name tables, one entry per calendar kind."""

from __future__ import annotations
from typing import Dict, Tuple

from ..core.types import CalendarKind as K

_GREG = ("January", "February", "March", "April", "May", "June", "July",
         "August", "September", "October", "November", "December")
_GREG_SHORT = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_CHINESE = ("正", "二", "三", "四", "五", "六", "七", "八", "九", "十", "十一", "十二")

MONTH_NAMES: Dict[K, Tuple[str, ...]] = {
    K.GREGORIAN: _GREG,
    K.JULIAN: _GREG,
    K.ISLAMIC: ("Muharram", "Safar", "Rabi' al-awwal", "Rabi' al-thani", "Jumada al-awwal",
                "Jumada al-thani", "Rajab", "Sha'ban", "Ramadan", "Shawwal",
                "Dhu al-Qi'dah", "Dhu al-Hijjah"),
    K.HEBREW: ("Nisan", "Iyar", "Sivan", "Tammuz", "Av", "Elul", "Tishrei", "Cheshvan",
               "Kislev", "Tevet", "Shevat", "Adar", "Adar II"),
    K.PERSIAN: ("Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
                "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand"),
    K.CHINESE: _CHINESE,
    K.ETHIOPIAN: ("Meskerem", "Tikimt", "Hidar", "Tahsas", "Tir", "Yekatit", "Megabit",
                  "Miazia", "Genbot", "Sene", "Hamle", "Nehase", "Pagume"),
    K.COPTIC: ("Tout", "Baba", "Hator", "Koiak", "Tobi", "Meshir", "Paremhat", "Paremoude",
               "Pashons", "Paoni", "Epip", "Mesori", "Pi Kogi Enavot"),
    K.INDIAN_SAKA: ("Chaitra", "Vaisakha", "Jyeshtha", "Ashadha", "Shravana", "Bhadra",
                    "Ashwin", "Kartika", "Agrahayana", "Pausha", "Magha", "Phalguna"),
    K.BAHAI: ("Bahá", "Jalál", "Jamál", "‘Aẓamat", "Núr", "Raḥmat", "Kalimát", "Kamál",
              "Asmá'", "‘Izzat", "Mashíyyat", "‘Ilm", "Qudrat", "Qawl", "Masá'il", "Sharaf",
              "Sulṭán", "Mulk", "Ayyám-i-Há", "‘Alá'"),
    K.THAI_BUDDHIST: ("มกราคม", "กุมภาพันธ์", "มีนาคม", "เมษายน", "พฤษภาคม", "มิถุนายน",
                      "กรกฎาคม", "สิงหาคม", "กันยายน", "ตุลาคม", "พฤศจิกายน", "ธันวาคม"),
    K.MAYAN_TZOLKIN: ("Imix", "Ik'", "Ak'b'al", "K'an", "Chikchan", "Kimi", "Manik'", "Lamat",
                      "Muluk", "Ok", "Chuwen", "Eb'", "B'en", "Ix", "Men", "K'ib'", "Kab'an",
                      "Etz'nab'", "Kawak", "Ajaw"),
    K.MAYAN_HAAB: ("Pop", "Wo'", "Sip", "Sotz'", "Sek", "Xul", "Yaxk'in", "Mol", "Ch'en", "Yax",
                   "Sak'", "Keh", "Mak", "K'ank'in", "Muwan", "Pax", "K'ayab'", "Kumk'u", "Wayeb'"),
    K.MAYAN_LONGCOUNT: (),
    K.CHEROKEE: ("Cold Moon", "Bony Moon", "Windy Moon", "Flower Moon", "Planting Moon",
                 "Green Corn Moon", "Ripe Corn Moon", "Fruit Moon", "Nut Moon", "Harvest Moon",
                 "Trading Moon", "Snow Moon"),
    K.IROQUOIS: ("First Moon", "Second Moon", "Third Moon", "Fourth Moon", "Fifth Moon",
                 "Sixth Moon", "Seventh Moon", "Eighth Moon", "Ninth Moon", "Tenth Moon",
                 "Eleventh Moon", "Twelfth Moon", "Thirteenth Moon"),
    K.AZTEC_XIUHPOHUALLI: ("Atlcahualo", "Tlacaxipehualiztli", "Tozoztontli", "Huey Tozoztli",
                           "Toxcatl", "Etzalcualiztli", "Tecuilhuitontli", "Huey Tecuilhuitl",
                           "Tlaxochimaco", "Xocotlhuetzi", "Ochpaniztli", "Teotleco",
                           "Tepeilhuitl", "Quecholli", "Panquetzaliztli", "Atemoztli", "Tititl",
                           "Izcalli", "Nemontemi"),
}

MONTH_NAMES_SHORT: Dict[K, Tuple[str, ...]] = {
    K.GREGORIAN: _GREG_SHORT,
    K.JULIAN: _GREG_SHORT,
    K.ISLAMIC: ("Muh", "Saf", "Rab I", "Rab II", "Jum I", "Jum II", "Raj", "Sha'", "Ram",
                "Shaw", "Dhu Q", "Dhu H"),
    K.HEBREW: ("Nis", "Iyy", "Siv", "Tam", "Av", "Elu", "Tis", "Che", "Kis", "Tev", "She",
               "Ada", "Ad2"),
    K.PERSIAN: ("Far", "Ord", "Kho", "Tir", "Mor", "Sha", "Meh", "Aba", "Aza", "Dey", "Bah", "Esf"),
    K.CHINESE: _CHINESE,
    K.ETHIOPIAN: ("Mes", "Tik", "Hid", "Tah", "Tir", "Yek", "Meg", "Mia", "Gen", "Sen", "Ham",
                  "Neh", "Pag"),
    K.COPTIC: ("Tou", "Bab", "Hat", "Koi", "Tob", "Mes", "Par", "Par", "Pas", "Pao", "Epi",
               "Mes", "PiK"),
    K.INDIAN_SAKA: ("Cha", "Vai", "Jye", "Ash", "Shr", "Bha", "Ash", "Kar", "Agr", "Pau", "Mag", "Pha"),
    K.BAHAI: ("Bah", "Jal", "Jam", "Aẓa", "Núr", "Raḥ", "Kal", "Kam", "Asm", "Izz", "Mas", "Ilm",
              "Qud", "Qaw", "Mas", "Sha", "Sul", "Mul", "Ayy", "Ala"),
    K.THAI_BUDDHIST: ("ม.ค.", "ก.พ.", "มี.ค.", "เม.ย.", "พ.ค.", "มิ.ย.", "ก.ค.", "ส.ค.", "ก.ย.",
                      "ต.ค.", "พ.ย.", "ธ.ค."),
    K.MAYAN_TZOLKIN: ("Imi", "Ik", "Ak'", "K'an", "Chi", "Kim", "Man", "Lam", "Mul", "Ok", "Chu",
                      "Eb", "B'en", "Ix", "Men", "K'ib", "Kab", "Etz", "Kaw", "Aja"),
    K.MAYAN_HAAB: ("Pop", "Wo", "Sip", "Sot", "Sek", "Xul", "Yax", "Mol", "Ch'e", "Yax", "Sak",
                   "Keh", "Mak", "K'an", "Muw", "Pax", "K'ay", "Kum", "Way"),
    K.MAYAN_LONGCOUNT: (),
    K.CHEROKEE: ("Cold", "Bony", "Windy", "Flower", "Planting", "Green Corn", "Ripe Corn",
                 "Fruit", "Nut", "Harvest", "Trading", "Snow"),
    K.IROQUOIS: ("1st Moon", "2nd Moon", "3rd Moon", "4th Moon", "5th Moon", "6th Moon",
                 "7th Moon", "8th Moon", "9th Moon", "10th Moon", "11th Moon", "12th Moon",
                 "13th Moon"),
    K.AZTEC_XIUHPOHUALLI: ("Atlc", "Tlac", "Toz", "Huey", "Tox", "Etz", "Tec", "Huey T", "Tlax",
                           "Xoc", "Och", "Teot", "Tepe", "Que", "Pan", "Atem", "Titi", "Izca", "Nemo"),
}

# Hebrew leap years rename month 12
HEBREW_ADAR_I = ("Adar I", "Ad1")

CHINESE_LEAP_PREFIX = "闰"

HEAVENLY_STEMS = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")
EARTHLY_BRANCHES = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")
ZODIAC_ANIMALS = ("Rat", "Ox", "Tiger", "Rabbit", "Dragon", "Snake", "Horse", "Goat",
                  "Monkey", "Rooster", "Dog", "Pig")
