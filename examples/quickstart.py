"""Quickstart example for lctime.

This example demonstrates basic usage of lctime for locale-aware date
formatting.

Note: Locales not shipped with lctime are built from Babel's CLDR data, so
their %c/%x/%X templates follow CLDR rather than the C library.
"""

from datetime import UTC, datetime, timedelta, timezone

from lctime import (
    POSIX_LOCALE,
    char_to_number,
    format_number,
    load_locale,
    strfduration,
    strftime,
)

t = datetime(2006, 1, 2, 15, 4, 5, tzinfo=UTC)

# Example 1: POSIX "C" locale
print("=" * 50)
print("Example 1: POSIX Locale")
print("=" * 50)

print(strftime("%a %b %d %Y %H:%M:%S", t, POSIX_LOCALE))
# Output: Mon Jan 02 2006 15:04:05

print(strftime("%c", t))
# Output: Mon Jan  2 15:04:05 2006

# Example 2: Locale codes
print("\n" + "=" * 50)
print("Example 2: Locale Codes")
print("=" * 50)

print(strftime("%A %e %B %Y", t, "fr_FR"))
# Output: lundi  2 janvier 2006

print(strftime("%x %X", t, "de-DE"))
# Output: 02.01.2006 15:04:05

print(strftime("%A %d %B %Y", t, "ar_EG"))
# Output: الاثنين ٠٢ يناير ٢٠٠٦

# Example 3: CLDR locales through Babel
print("\n" + "=" * 50)
print("Example 3: CLDR Locales")
print("=" * 50)

for code in ("es_ES", "ja_JP", "hi_IN"):
    print(f"{code}: {strftime('%c', t, code)}")

# Example 4: Time zones and week numbers
print("\n" + "=" * 50)
print("Example 4: Offsets and Weeks")
print("=" * 50)

kabul = timezone(timedelta(hours=4, minutes=30))
print(strftime("%F %T %z", t.astimezone(kabul), POSIX_LOCALE))
# Output: 2006-01-02 19:34:05 +0430

print(strftime("ISO %G-W%V-%u, Sunday week %U, Monday week %W", t, POSIX_LOCALE))
# Output: ISO 2006-W01-1, Sunday week 01, Monday week 01

# Example 5: Unknown directives pass through
print("\n" + "=" * 50)
print("Example 5: Unknown Directives")
print("=" * 50)

print(strftime("%Y %q 100%", t, POSIX_LOCALE))
# Output: 2006 %q 100%

# Example 6: Numeral helpers
print("\n" + "=" * 50)
print("Example 6: Numerals")
print("=" * 50)

print(char_to_number("٧"))
# Output: 7

print(format_number(2024, "fa_IR"))
# Output: ۲۰۲۴

print(strfduration(timedelta(hours=2), "ar_EG"))
# Output: ١٢٠

print(load_locale("ar-EG").name)
# Output: ar_EG
