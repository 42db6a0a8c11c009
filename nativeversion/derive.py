# Derives the fields of a version resource from the raw build inputs.

from .configurations import getConfigurationKind
from .diagnostics import (
	InvalidFileVersion, LanguageUnsupported, UnknownLanguage,
	UnsupportedConfiguration
	)
from .fieldset import FieldSet, isBlank
from .locales import lookupLCID, parseLCID
from .versionnumber import parseVersion, tryParseVersion

from datetime import date
from ntpath import basename, splitext
import re

copyrightTemplate = 'Copyright (c) %d. All rights reserved.'

# Codepages fill the low word of the version block.
maxCodepage = 0xFFFF

_reCodepage = re.compile(r'\s*([0-9]+)\s*$')

class Derivation(object):
	'''Outcome of deriveFields(): either a FieldSet or a non-empty list of
	diagnostics, never both.
	'''

	def __init__(self, fieldSet, diagnostics):
		assert (fieldSet is None) == bool(diagnostics), diagnostics
		self.fieldSet = fieldSet
		self.diagnostics = diagnostics

	@property
	def succeeded(self):
		return self.fieldSet is not None

	def __bool__(self):
		return self.succeeded

	def __repr__(self):
		if self.succeeded:
			return 'Derivation(%r)' % (self.fieldSet, )
		return 'Derivation(diagnostics=%r)' % (self.diagnostics, )

def defaultIfBlank(value, default):
	return default if isBlank(value) else value

def internalNameFor(targetFileName):
	'''Returns the file name without directory and extension.
	Both "/" and "\\" separate directories, as build systems on Windows
	pass either.
	'''
	if targetFileName is None:
		return None
	return splitext(basename(targetFileName))[0]

def resolveLanguage(language, resolveLocaleNames = True):
	'''Determines the LCID for the given language.
	Returns a pair of the LCID and a diagnostic; exactly one is None.
	'''
	if isBlank(language):
		return 0, None
	lcid = parseLCID(language)
	if lcid is not None:
		return lcid, None
	if not resolveLocaleNames:
		return None, LanguageUnsupported(language)
	try:
		return lookupLCID(language), None
	except ValueError:
		return None, UnknownLanguage(language)

def parseCodepage(codepage):
	'''Returns the codepage as a number; anything that is not a decimal
	number in the 16-bit range counts as 0.
	'''
	if codepage is None:
		return 0
	match = _reCodepage.match(codepage)
	if match is None:
		return 0
	value = int(match.group(1))
	return value if value <= maxCodepage else 0

def versionBlockFor(lcid, codepage):
	'''Returns the StringFileInfo block name: the LCID in the high word and
	the codepage in the low word, as 8 uppercase hex digits.
	'''
	return '%08X' % (((lcid << 16) | codepage) & 0xFFFFFFFF)

def deriveFields(
		configurationType, fileVersion, targetFileName, assemblyName = None,
		assemblyVersion = None, informationalVersion = None, title = None,
		product = None, company = None, copyright = None, language = None,
		codepage = None, year = None, resolveLocaleNames = True
		):
	'''Validates the raw inputs and derives the version resource fields.
	All inputs are strings as passed by the build system; any of the
	optional ones may be None or blank. "year" is used in the default
	copyright message and defaults to the current year.
	Returns a Derivation.
	'''
	diagnostics = []

	try:
		kind = getConfigurationKind(configurationType)
	except ValueError:
		kind = None
		diagnostics.append(UnsupportedConfiguration(configurationType))

	try:
		fileVer = parseVersion(fileVersion)
	except ValueError:
		fileVer = None
		diagnostics.append(InvalidFileVersion(fileVersion))

	lcid, problem = resolveLanguage(language, resolveLocaleNames)
	if problem is not None:
		diagnostics.append(problem)

	if diagnostics:
		return Derivation(None, diagnostics)

	productVer = tryParseVersion(assemblyVersion) or fileVer
	codepageNum = parseCodepage(codepage)
	if year is None:
		year = date.today().year

	numericFields = {
		'NBGV_FILE_MAJOR_VERSION': fileVer.major,
		'NBGV_FILE_MINOR_VERSION': fileVer.minor,
		'NBGV_FILE_BUILD_VERSION': fileVer.build,
		'NBGV_FILE_REVISION_VERSION': fileVer.revision,
		'NBGV_PRODUCT_MAJOR_VERSION': productVer.major,
		'NBGV_PRODUCT_MINOR_VERSION': productVer.minor,
		'NBGV_PRODUCT_BUILD_VERSION': productVer.build,
		'NBGV_PRODUCT_REVISION_VERSION': productVer.revision,
		'NBGV_FILE_TYPE': kind.fileType,
		'NBGV_LCID': lcid,
		'NBGV_CODEPAGE': codepageNum,
		}
	stringFields = {
		'NBGV_PRODUCT_VERSION': str(productVer),
		'NBGV_FILE_VERSION': str(fileVer),
		'NBGV_INFORMATIONAL_VERSION':
			defaultIfBlank(informationalVersion, str(productVer)),
		'NGBV_FILE_NAME': targetFileName,
		'NGBV_INTERNAL_NAME': internalNameFor(targetFileName),
		'NGBV_TITLE': defaultIfBlank(title, assemblyName),
		'NGBV_PRODUCT': defaultIfBlank(product, assemblyName),
		'NBGV_COPYRIGHT':
			defaultIfBlank(copyright, copyrightTemplate % year),
		'NGBV_COMPANY': defaultIfBlank(company, assemblyName),
		'NBGV_VERSION_BLOCK': versionBlockFor(lcid, codepageNum),
		}
	return Derivation(FieldSet(numericFields, stringFields), [])
