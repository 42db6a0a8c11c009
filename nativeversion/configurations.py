# Defines the kinds of native binaries a version resource can describe.

class ConfigurationKind(object):
	'''Abstract base class for configuration kinds.
	'''

	# Name as used by the build system, for example "Application".
	name = None

	# Value for the FILETYPE field of the VERSIONINFO resource.
	fileType = None

class Application(ConfigurationKind):
	'''Executable program (VFT_APP).
	'''
	name = 'Application'
	fileType = 0x1

class DynamicLibrary(ConfigurationKind):
	'''Dynamic-link library (VFT_DLL).
	'''
	name = 'DynamicLibrary'
	fileType = 0x2

def iterConfigurationKinds():
	'''Iterates through all supported configuration kinds.
	'''
	yield Application
	yield DynamicLibrary

def getConfigurationKind(name):
	'''Looks up a configuration kind by name; case is ignored.
	Raises ValueError if there is no configuration kind with the given name.
	'''
	if name is not None:
		wanted = name.strip().upper()
		for kind in iterConfigurationKinds():
			if kind.name.upper() == wanted:
				return kind
	raise ValueError('No configuration kind named "%s"' % name)
