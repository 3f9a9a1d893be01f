from collections.abc import Iterable, Iterator

from domain.models.currency import Currency

_CURRENCIES = (
    Currency("USD", "United States Dollar", "🇺🇸"),
    Currency("EUR", "Euro", "🇪🇺"),
    Currency("GBP", "British Pound Sterling", "🇬🇧"),
    Currency("JPY", "Japanese Yen", "🇯🇵"),
    Currency("CHF", "Swiss Franc", "🇨🇭"),
    Currency("CAD", "Canadian Dollar", "🇨🇦"),
    Currency("AUD", "Australian Dollar", "🇦🇺"),
    Currency("NZD", "New Zealand Dollar", "🇳🇿"),
    Currency("CNY", "Chinese Yuan", "🇨🇳"),
    Currency("HKD", "Hong Kong Dollar", "🇭🇰"),
    Currency("SGD", "Singapore Dollar", "🇸🇬"),
    Currency("PLN", "Polish Zloty", "🇵🇱"),
    Currency("CZK", "Czech Koruna", "🇨🇿"),
    Currency("HUF", "Hungarian Forint", "🇭🇺"),
    Currency("RON", "Romanian Leu", "🇷🇴"),
    Currency("BGN", "Bulgarian Lev", "🇧🇬"),
    Currency("SEK", "Swedish Krona", "🇸🇪"),
    Currency("NOK", "Norwegian Krone", "🇳🇴"),
    Currency("DKK", "Danish Krone", "🇩🇰"),
    Currency("ISK", "Icelandic Krona", "🇮🇸"),
    Currency("TRY", "Turkish Lira", "🇹🇷"),
    Currency("UAH", "Ukrainian Hryvnia", "🇺🇦"),
    Currency("RSD", "Serbian Dinar", "🇷🇸"),
    Currency("GEL", "Georgian Lari", "🇬🇪"),
    Currency("ILS", "Israeli New Shekel", "🇮🇱"),
    Currency("AED", "United Arab Emirates Dirham", "🇦🇪"),
    Currency("SAR", "Saudi Riyal", "🇸🇦"),
    Currency("QAR", "Qatari Riyal", "🇶🇦"),
    Currency("KWD", "Kuwaiti Dinar", "🇰🇼"),
    Currency("EGP", "Egyptian Pound", "🇪🇬"),
    Currency("MAD", "Moroccan Dirham", "🇲🇦"),
    Currency("ZAR", "South African Rand", "🇿🇦"),
    Currency("NGN", "Nigerian Naira", "🇳🇬"),
    Currency("KES", "Kenyan Shilling", "🇰🇪"),
    Currency("GHS", "Ghanaian Cedi", "🇬🇭"),
    Currency("INR", "Indian Rupee", "🇮🇳"),
    Currency("PKR", "Pakistani Rupee", "🇵🇰"),
    Currency("BDT", "Bangladeshi Taka", "🇧🇩"),
    Currency("LKR", "Sri Lankan Rupee", "🇱🇰"),
    Currency("KRW", "South Korean Won", "🇰🇷"),
    Currency("TWD", "New Taiwan Dollar", "🇹🇼"),
    Currency("THB", "Thai Baht", "🇹🇭"),
    Currency("MYR", "Malaysian Ringgit", "🇲🇾"),
    Currency("IDR", "Indonesian Rupiah", "🇮🇩"),
    Currency("PHP", "Philippine Peso", "🇵🇭"),
    Currency("VND", "Vietnamese Dong", "🇻🇳"),
    Currency("KZT", "Kazakhstani Tenge", "🇰🇿"),
    Currency("MXN", "Mexican Peso", "🇲🇽"),
    Currency("BRL", "Brazilian Real", "🇧🇷"),
    Currency("ARS", "Argentine Peso", "🇦🇷"),
    Currency("CLP", "Chilean Peso", "🇨🇱"),
    Currency("COP", "Colombian Peso", "🇨🇴"),
    Currency("PEN", "Peruvian Sol", "🇵🇪"),
    Currency("UYU", "Uruguayan Peso", "🇺🇾"),
    Currency("JMD", "Jamaican Dollar", "🇯🇲"),
    Currency("TTD", "Trinidad and Tobago Dollar", "🇹🇹"),
    Currency("BSD", "Bahamian Dollar", "🇧🇸"),
    Currency("FJD", "Fijian Dollar", "🇫🇯"),
    Currency("XAU", "Gold (troy ounce)", "🪙"),
    Currency("BTC", "Bitcoin", "₿"),
)

POPULAR_CODES = ("USD", "EUR", "GBP", "JPY", "CHF", "CAD", "AUD", "CNY", "PLN", "SEK", "NOK")


class CurrencyCatalog:
    """Static, read-only registry of the currencies the converter offers."""

    def __init__(self, currencies: Iterable[Currency] = _CURRENCIES,
                 popular_codes: Iterable[str] = POPULAR_CODES):
        self._currencies = tuple(currencies)
        self._by_code = {c.code: c for c in self._currencies}
        self._popular = tuple(self._by_code[code] for code in popular_codes if code in self._by_code)

    def __len__(self) -> int:
        return len(self._currencies)

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currencies)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def all_currencies(self) -> list[Currency]:
        return list(self._currencies)

    def find(self, code: str) -> Currency | None:
        return self._by_code.get(code)

    def search(self, query: str) -> list[Currency]:
        """Case-insensitive substring match on code or name. A blank query matches nothing."""
        needle = query.strip().lower()
        if not needle:
            return []
        return [
            c for c in self._currencies
            if needle in c.code.lower() or needle in c.name.lower()
        ]

    def popular(self) -> list[Currency]:
        return list(self._popular)


default_catalog = CurrencyCatalog()
