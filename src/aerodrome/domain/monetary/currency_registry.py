from aerodrome.domain.monetary.currency import Currency


# North America
USD = Currency("USD", 2, "US Dollar", "$")
CAD = Currency("CAD", 2, "Canadian Dollar", "CA$")
MXN = Currency("MXN", 2, "Mexican Peso", "MX$")

# Europe
EUR = Currency("EUR", 2, "Euro", "€")
GBP = Currency("GBP", 2, "British Pound", "£")
CHF = Currency("CHF", 2, "Swiss Franc", "CHF")
SEK = Currency("SEK", 2, "Swedish Krona", "kr")

# Asia / Pacific
AUD = Currency("AUD", 2, "Australian Dollar", "A$")
JPY = Currency("JPY", 0, "Japanese Yen", "¥")
KRW = Currency("KRW", 0, "South Korean Won", "₩")
CNY = Currency("CNY", 2, "Chinese Yuan", "CN¥")
INR = Currency("INR", 2, "Indian Rupee", "₹")

# South America
BRL = Currency("BRL", 2, "Brazilian Real", "R$")

# Middle East (three fraction digits)
KWD = Currency("KWD", 3, "Kuwaiti Dinar", "KD")
BHD = Currency("BHD", 3, "Bahraini Dinar", "BD")

# Register all predefined currencies
for _currency in (USD, CAD, MXN, EUR, GBP, CHF, SEK, AUD, JPY, KRW, CNY, INR, BRL, KWD, BHD):
    Currency.register(_currency, overwrite=True)
