# Parsing of "major.minor.build.revision" version strings.

import re

# Largest value a version component can hold; native version resources store
# components in signed 32-bit fields during the build.
maxComponentValue = 0x7FFFFFFF

_reComponent = re.compile(r'\s*\+?([0-9]+)\s*$')

class VersionQuadruplet(object):
	'''Four part version number: major, minor, build and revision.
	Instances are immutable.
	'''
	__slots__ = ('__components', )

	def __init__(self, major, minor, build = 0, revision = 0):
		components = (major, minor, build, revision)
		for component in components:
			if not isinstance(component, int) or component < 0:
				raise ValueError(
					'Invalid version component: %r' % (component, )
					)
		self.__components = components

	@property
	def major(self):
		return self.__components[0]

	@property
	def minor(self):
		return self.__components[1]

	@property
	def build(self):
		return self.__components[2]

	@property
	def revision(self):
		return self.__components[3]

	def __iter__(self):
		return iter(self.__components)

	def __eq__(self, other):
		if not isinstance(other, VersionQuadruplet):
			return NotImplemented
		return self.__components == tuple(other)

	def __hash__(self):
		return hash(self.__components)

	def __repr__(self):
		return 'VersionQuadruplet(%d, %d, %d, %d)' % self.__components

	def __str__(self):
		return '%d.%d.%d.%d' % self.__components

def parseVersion(versionStr):
	'''Parses a version string of one to four dot-separated non-negative
	integers. Missing trailing components are zero.
	Raises ValueError if the string is not a valid version.
	'''
	if versionStr is None:
		raise ValueError('No version specified')
	parts = versionStr.split('.')
	if len(parts) > 4:
		raise ValueError('Too many components in version "%s"' % versionStr)
	components = []
	for part in parts:
		match = _reComponent.match(part)
		if match is None:
			raise ValueError(
				'Invalid component "%s" in version "%s"' % (part, versionStr)
				)
		value = int(match.group(1))
		if value > maxComponentValue:
			raise ValueError(
				'Component %d in version "%s" is too large'
				% (value, versionStr)
				)
		components.append(value)
	components += [0] * (4 - len(components))
	return VersionQuadruplet(*components)

def tryParseVersion(versionStr):
	'''Like parseVersion(), but returns None instead of raising ValueError.
	'''
	try:
		return parseVersion(versionStr)
	except ValueError:
		return None
