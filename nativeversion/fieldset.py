# The validated, render-ready values of a version resource.

# Numeric fields, in the order they are emitted.
numericFieldNames = (
	'NBGV_FILE_MAJOR_VERSION',
	'NBGV_FILE_MINOR_VERSION',
	'NBGV_FILE_BUILD_VERSION',
	'NBGV_FILE_REVISION_VERSION',
	'NBGV_PRODUCT_MAJOR_VERSION',
	'NBGV_PRODUCT_MINOR_VERSION',
	'NBGV_PRODUCT_BUILD_VERSION',
	'NBGV_PRODUCT_REVISION_VERSION',
	'NBGV_FILE_TYPE',
	'NBGV_LCID',
	'NBGV_CODEPAGE',
	)

# String fields, in the order they are emitted.
# Note: The "NGBV" spelling is what existing resource scripts reference.
stringFieldNames = (
	'NBGV_PRODUCT_VERSION',
	'NBGV_FILE_VERSION',
	'NBGV_INFORMATIONAL_VERSION',
	'NGBV_FILE_NAME',
	'NGBV_INTERNAL_NAME',
	'NGBV_TITLE',
	'NGBV_PRODUCT',
	'NBGV_COPYRIGHT',
	'NGBV_COMPANY',
	'NBGV_VERSION_BLOCK',
	)

def isBlank(value):
	return value is None or not value.strip()

class FieldSet(object):
	'''Immutable mapping from field name to an integer or string value.
	All numeric fields are required; string fields that are blank are
	dropped on construction, so they never reach the output.
	'''

	def __init__(self, numericFields, stringFields):
		numeric = {}
		for name in numericFieldNames:
			value = numericFields[name]
			if not isinstance(value, int):
				raise ValueError(
					'Numeric field %s has non-integer value %r' % (name, value)
					)
			numeric[name] = value
		unknown = set(numericFields) - set(numericFieldNames)
		if unknown:
			raise ValueError(
				'Unknown numeric fields: %s' % ', '.join(sorted(unknown))
				)

		strings = {}
		for name, value in stringFields.items():
			if name not in stringFieldNames:
				raise ValueError('Unknown string field: %s' % name)
			if not isBlank(value):
				strings[name] = value

		self.__numeric = numeric
		self.__strings = strings

	def iterNumericFields(self):
		'''Iterates through (name, value) pairs of the numeric fields,
		in emission order.
		'''
		for name in numericFieldNames:
			yield name, self.__numeric[name]

	def iterStringFields(self):
		'''Iterates through (name, value) pairs of the non-blank string
		fields, in emission order.
		'''
		for name in stringFieldNames:
			if name in self.__strings:
				yield name, self.__strings[name]

	def __getitem__(self, name):
		if name in self.__numeric:
			return self.__numeric[name]
		return self.__strings[name]

	def __contains__(self, name):
		return name in self.__numeric or name in self.__strings

	def __iter__(self):
		for name, value_ in self.iterNumericFields():
			yield name
		for name, value_ in self.iterStringFields():
			yield name

	def __len__(self):
		return len(self.__numeric) + len(self.__strings)

	def __eq__(self, other):
		if not isinstance(other, FieldSet):
			return NotImplemented
		return dict(self.items()) == dict(other.items())

	def __hash__(self):
		return hash(tuple(self.items()))

	def get(self, name, default = None):
		return self[name] if name in self else default

	def items(self):
		return [ (name, self[name]) for name in self ]

	def __repr__(self):
		return 'FieldSet(%s)' % ', '.join(
			'%s=%r' % item for item in self.items()
			)
