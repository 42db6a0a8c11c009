# Problems found in the inputs of a version info generation.
# These are reported back to the caller instead of being raised, so that all
# of them can be shown at once.

class Diagnostic(object):
	'''Abstract base class for input validation failures.
	'''

	# Short identifier of the kind of problem.
	code = None

	# Message template; "%s" is replaced by the offending value.
	template = None

	def __init__(self, value):
		self.value = value

	@property
	def message(self):
		return self.template % (self.value, )

	def __eq__(self, other):
		return type(self) is type(other) and self.value == other.value

	def __hash__(self):
		return hash((self.code, self.value))

	def __repr__(self):
		return '%s(%r)' % (self.__class__.__name__, self.value)

	def __str__(self):
		return 'error %s: %s' % (self.code, self.message)

class UnsupportedConfiguration(Diagnostic):
	code = 'UnsupportedConfiguration'
	template = (
		"Unsupported ConfigurationType '%s'. Only 'Application' and "
		"'DynamicLibrary' are supported at this time."
		)

class InvalidFileVersion(Diagnostic):
	code = 'InvalidFileVersion'
	template = (
		"Cannot process AssemblyFileVersion '%s' into a valid four part "
		"version. Expected up to four dot-separated non-negative integers, "
		"such as '1.2.3.4'."
		)

class LanguageUnsupported(Diagnostic):
	code = 'LanguageUnsupported'
	template = (
		"Unknown AssemblyLanguage '%s'. Must specify the language as an LCID."
		)

class UnknownLanguage(Diagnostic):
	code = 'UnknownLanguage'
	template = (
		"Unknown AssemblyLanguage '%s'. Cannot determine LCID for that "
		"culture; specify a culture name such as 'en-US' or a numeric LCID."
		)

class UnsupportedCodeLanguage(Diagnostic):
	code = 'UnsupportedCodeLanguage'
	template = (
		"Code provider not available for language: %s. No version info will "
		"be embedded into assembly."
		)
