# Generates a native version resource header for a build target.
# This is the glue between the build system and the generator: it collects
# the inputs, reports problems and writes the output file.

from .derive import deriveFields
from .diagnostics import UnsupportedCodeLanguage
from .emitters import getEmitter
from .makeutils import extractMakeVariables
from .outpututils import rewriteIfChanged

from optparse import OptionParser
import sys

# Maps build system variable names to deriveFields() arguments.
inputVariables = (
	('CONFIGURATION_TYPE', 'configurationType'),
	('ASSEMBLY_FILE_VERSION', 'fileVersion'),
	('TARGET_FILE_NAME', 'targetFileName'),
	('ASSEMBLY_NAME', 'assemblyName'),
	('ASSEMBLY_VERSION', 'assemblyVersion'),
	('ASSEMBLY_INFORMATIONAL_VERSION', 'informationalVersion'),
	('ASSEMBLY_TITLE', 'title'),
	('ASSEMBLY_PRODUCT', 'product'),
	('ASSEMBLY_COMPANY', 'company'),
	('ASSEMBLY_COPYRIGHT', 'copyright'),
	('ASSEMBLY_LANGUAGE', 'language'),
	('ASSEMBLY_CODEPAGE', 'codepage'),
	)

defaultCodeLanguage = 'c++'

def generate(outputFile, codeLanguage, inputs, log = sys.stdout):
	'''Generates the version resource header for the given inputs, which is
	a dictionary of deriveFields() keyword arguments.
	The file is only written if all inputs are valid.
	Returns the list of diagnostics; it is empty on success.
	'''
	try:
		emitter = getEmitter(codeLanguage)
	except ValueError:
		return [ UnsupportedCodeLanguage(codeLanguage) ]

	derivation = deriveFields(**inputs)
	if not derivation.succeeded:
		return derivation.diagnostics

	rewriteIfChanged(outputFile, emitter.render(derivation.fieldSet), log)
	return []

def createParser():
	parser = OptionParser(
		usage = 'usage: %prog [options] OUTPUT_FILE',
		description = 'Generates a header with native version information '
			'that can be included by C/C++ code and by resource scripts.'
		)
	parser.add_option(
		'--vars', type = 'string', dest = 'varsFile', metavar = 'FILE',
		help = 'read inputs from Makefile-style variable definitions'
		)
	parser.add_option(
		'-l', '--code-language', type = 'string', dest = 'codeLanguage',
		help = 'language of the generated code [default: %s]'
			% defaultCodeLanguage
		)
	parser.add_option(
		'-c', '--configuration-type', type = 'string',
		dest = 'configurationType',
		help = '"Application" or "DynamicLibrary"'
		)
	parser.add_option(
		'-f', '--file-version', type = 'string', dest = 'fileVersion',
		help = 'file version, for example 1.2.3.4'
		)
	parser.add_option(
		'-t', '--target-file-name', type = 'string', dest = 'targetFileName',
		help = 'file name of the binary, for example tool.exe'
		)
	parser.add_option(
		'-n', '--assembly-name', type = 'string', dest = 'assemblyName'
		)
	parser.add_option(
		'-v', '--assembly-version', type = 'string', dest = 'assemblyVersion',
		help = 'product version; defaults to the file version'
		)
	parser.add_option(
		'-i', '--informational-version', type = 'string',
		dest = 'informationalVersion'
		)
	parser.add_option('--title', type = 'string', dest = 'title')
	parser.add_option('--product', type = 'string', dest = 'product')
	parser.add_option('--company', type = 'string', dest = 'company')
	parser.add_option('--copyright', type = 'string', dest = 'copyright')
	parser.add_option(
		'--language', type = 'string', dest = 'language',
		help = 'LCID or culture name, for example 1033 or en-US'
		)
	parser.add_option('--codepage', type = 'string', dest = 'codepage')
	parser.add_option(
		'--no-locale-names', action = 'store_false', default = True,
		dest = 'resolveLocaleNames',
		help = 'only accept numeric LCIDs as language'
		)
	return parser

def collectInputs(options, makeVars):
	'''Merges variables from a Makefile with the command line options;
	options that were given take precedence.
	'''
	inputs = {}
	for varName, argName in inputVariables:
		value = getattr(options, argName)
		if value is None:
			value = makeVars.get(varName)
		inputs[argName] = value
	inputs['resolveLocaleNames'] = options.resolveLocaleNames
	return inputs

def run(argv = None, log = sys.stdout):
	'''Runs the generator with the given command line arguments.
	Returns the process exit code.
	'''
	parser = createParser()
	options, args = parser.parse_args(argv)

	makeVars = {}
	if options.varsFile is not None:
		try:
			makeVars = extractMakeVariables(options.varsFile)
		except (OSError, ValueError, KeyError) as ex:
			print(
				'Failed to read variables from %s: %s' % (options.varsFile, ex),
				file=sys.stderr
				)
			return 2

	if len(args) == 1:
		outputFile = args[0]
	elif not args and makeVars.get('OUTPUT_FILE'):
		outputFile = makeVars['OUTPUT_FILE']
	else:
		parser.print_usage(sys.stderr)
		return 2

	codeLanguage = options.codeLanguage \
		or makeVars.get('CODE_LANGUAGE') or defaultCodeLanguage
	inputs = collectInputs(options, makeVars)

	try:
		diagnostics = generate(outputFile, codeLanguage, inputs, log)
	except OSError as ex:
		print('Failed to write %s: %s' % (outputFile, ex), file=sys.stderr)
		return 1
	for diagnostic in diagnostics:
		print(diagnostic, file=sys.stderr)
	return 1 if diagnostics else 0

def main():
	sys.exit(run())

if __name__ == '__main__':
	main()
