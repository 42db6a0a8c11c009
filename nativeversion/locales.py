# Maps locale names to Windows locale identifiers (LCIDs).
# The table comes from the Python "locale" module, which knows the LCIDs that
# Windows assigns to specific cultures such as "en-US". Neutral cultures such
# as "en" get the primary language ID of their specific cultures, which is
# how Windows numbers them as well.

from locale import windows_locale
import re

# Mask for the primary language part of a LANGID.
primaryLanguageMask = 0x3FF

# LCIDs end up in the high word of the version block.
maxLCID = 0xFFFF

_reLCID = re.compile(r'\s*(?:0[xX]([0-9a-fA-F]+)|([0-9]+))\s*$')

def normalizeLocaleName(name):
	'''Normalizes a locale name for lookup: "en-US", "EN_us" and "en_US"
	all become "en_us". An encoding or modifier suffix ("en_US.UTF-8",
	"sr_RS@latin") is dropped.
	'''
	name = name.strip()
	for separator in ('.', '@'):
		index = name.find(separator)
		if index != -1:
			name = name[ : index]
	return name.replace('-', '_').lower()

def _buildTables():
	specific = {}
	neutral = {}
	for lcid, name in sorted(windows_locale.items()):
		key = normalizeLocaleName(name)
		# Several LCIDs can share a name; the lowest one is the primary.
		specific.setdefault(key, lcid)
		language = key.split('_')[0]
		neutral.setdefault(language, lcid & primaryLanguageMask)
	return specific, neutral

_specificLCIDs, _neutralLCIDs = _buildTables()

def lookupLCID(name):
	'''Returns the LCID for the given locale name.
	Raises ValueError if the name is not a known locale.
	'''
	key = normalizeLocaleName(name)
	if key in _specificLCIDs:
		return _specificLCIDs[key]
	if key in _neutralLCIDs:
		return _neutralLCIDs[key]
	raise ValueError('Unknown locale "%s"' % name)

def parseLCID(valueStr):
	'''Parses a raw numeric LCID, either decimal ("1033") or hexadecimal
	("0x0409"). Returns None if the string is not numeric or does not fit
	in 16 bits.
	'''
	match = _reLCID.match(valueStr)
	if match is None:
		return None
	hexDigits, decDigits = match.groups()
	value = int(hexDigits, 16) if hexDigits else int(decDigits)
	return value if value <= maxLCID else None
