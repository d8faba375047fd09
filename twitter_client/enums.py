"""BCP 47 language identifiers accepted by the streaming `language` parameter."""
from enum import Enum


class Language(str, Enum):
    AMHARIC = "am"
    ARABIC = "ar"
    ARMENIAN = "hy"
    BENGALI = "bn"
    BULGARIAN = "bg"
    BURMESE = "my"
    CATALAN = "ca"
    CHEROKEE = "chr"
    CHINESE = "zh"
    CHINESE_SIMPLIFIED = "zh-cn"
    CHINESE_TRADITIONAL = "zh-tw"
    CZECH = "cs"
    DANISH = "da"
    DHIVEHI = "dv"
    DUTCH = "nl"
    ENGLISH = "en"
    ENGLISH_UK = "en-gb"
    ESTONIAN = "et"
    FILIPINO = "fil"
    FINNISH = "fi"
    FRENCH = "fr"
    GEORGIAN = "ka"
    GERMAN = "de"
    GREEK = "el"
    GUJARATI = "gu"
    HAITIAN = "ht"
    HEBREW = "he"
    HINDI = "hi"
    HUNGARIAN = "hu"
    ICELANDIC = "is"
    INDONESIAN = "id"
    INUKTITUT = "iu"
    ITALIAN = "it"
    JAPANESE = "ja"
    KANNADA = "kn"
    KHMER = "km"
    KOREAN = "ko"
    LAO = "lo"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    MALAY = "msa"
    MALAYALAM = "ml"
    MARATHI = "mr"
    NEPALI = "ne"
    NORWEGIAN = "no"
    ORIYA = "or"
    PANJABI = "pa"
    PASHTO = "ps"
    PERSIAN = "fa"
    POLISH = "pl"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SERBIAN = "sr"
    SINDHI = "sd"
    SINHALA = "si"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SWEDISH = "sv"
    TAMIL = "ta"
    TELUGU = "te"
    THAI = "th"
    TIBETAN = "bo"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    URDU = "ur"
    UYGHUR = "ug"
    VIETNAMESE = "vi"
    WELSH = "cy"
    UNDEFINED = "und"
