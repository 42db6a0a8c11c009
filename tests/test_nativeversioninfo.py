import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr

from nativeversion.diagnostics import UnsupportedCodeLanguage, UnsupportedConfiguration
from nativeversion.nativeversioninfo import generate, run

def inputs(**overrides):
	values = dict(
		configurationType='Application',
		fileVersion='1.2.3.4',
		targetFileName='Contoso.Tool.dll',
		assemblyName='Contoso.Tool',
		year=2024,
	)
	values.update(overrides)
	return values

class GenerateTests(unittest.TestCase):
	def setUp(self):
		self._tmp = tempfile.TemporaryDirectory()
		self.tmp = self._tmp.name
		self.log = io.StringIO()

	def tearDown(self):
		self._tmp.cleanup()

	def read(self, path):
		with open(path, 'r', encoding='utf-8', newline='') as inp:
			return inp.read()

	def test_writes_file_and_creates_directories(self):
		path = os.path.join(self.tmp, 'obj', 'Release', 'version.h')
		diagnostics = generate(path, 'c++', inputs(), self.log)
		self.assertEqual(diagnostics, [])
		text = self.read(path)
		self.assertTrue(text.startswith('#pragma once\n'))
		self.assertIn('#define NGBV_INTERNAL_NAME NBGV_VERSION_STRING("Contoso.Tool")\n', text)
		self.assertTrue(text.endswith('#endif\n'))
		self.assertIn('Creating %s...' % path, self.log.getvalue())

	def test_unchanged_file_is_not_rewritten(self):
		path = os.path.join(self.tmp, 'version.h')
		generate(path, 'c++', inputs(), self.log)
		generate(path, 'c++', inputs(), self.log)
		self.assertIn('Up to date: %s' % path, self.log.getvalue())
		generate(path, 'c++', inputs(fileVersion='2.0'), self.log)
		self.assertIn('Updating %s...' % path, self.log.getvalue())
		self.assertIn('#define NBGV_FILE_MAJOR_VERSION 2\n', self.read(path))

	def test_no_file_on_failure(self):
		path = os.path.join(self.tmp, 'version.h')
		diagnostics = generate(
			path, 'c++', inputs(configurationType='StaticLibrary'), self.log
		)
		self.assertEqual(diagnostics, [UnsupportedConfiguration('StaticLibrary')])
		self.assertFalse(os.path.exists(path))

	def test_unsupported_code_language(self):
		path = os.path.join(self.tmp, 'version.cs')
		diagnostics = generate(path, 'C#', inputs(), self.log)
		self.assertEqual(diagnostics, [UnsupportedCodeLanguage('C#')])
		self.assertFalse(os.path.exists(path))

class RunTests(unittest.TestCase):
	def setUp(self):
		self._tmp = tempfile.TemporaryDirectory()
		self.tmp = self._tmp.name
		self.log = io.StringIO()
		self.stderr = io.StringIO()

	def tearDown(self):
		self._tmp.cleanup()

	def run_cli(self, *args):
		with redirect_stderr(self.stderr):
			return run(list(args), self.log)

	def test_command_line_options(self):
		path = os.path.join(self.tmp, 'version.h')
		status = self.run_cli(
			'-c', 'DynamicLibrary', '-f', '1.2.3.4', '-t', 'tool.dll',
			'--language', 'en-US', '--codepage', '1200', path
		)
		self.assertEqual(status, 0)
		with open(path, encoding='utf-8') as inp:
			text = inp.read()
		self.assertIn('#define NBGV_FILE_TYPE 2\n', text)
		self.assertIn('#define NBGV_VERSION_BLOCK NBGV_VERSION_STRING("040904B0")\n', text)

	def test_vars_file_with_overrides(self):
		path = os.path.join(self.tmp, 'out', 'version.h')
		varsPath = os.path.join(self.tmp, 'version.mk')
		with open(varsPath, 'w', encoding='utf-8') as out:
			out.write('CONFIGURATION_TYPE = Application\n')
			out.write('ASSEMBLY_FILE_VERSION = 1.0.0.0\n')
			out.write('ASSEMBLY_NAME = Contoso.Tool\n')
			out.write('TARGET_FILE_NAME := $(ASSEMBLY_NAME).exe\n')
			out.write('OUTPUT_FILE = %s\n' % path)
		status = self.run_cli('--vars', varsPath, '-f', '3.1')
		self.assertEqual(status, 0)
		with open(path, encoding='utf-8') as inp:
			text = inp.read()
		self.assertIn('#define NBGV_FILE_MAJOR_VERSION 3\n', text)
		self.assertIn('#define NGBV_FILE_NAME NBGV_VERSION_STRING("Contoso.Tool.exe")\n', text)

	def test_diagnostics_are_reported(self):
		path = os.path.join(self.tmp, 'version.h')
		status = self.run_cli(
			'-c', 'Utility', '-f', 'bad', '-t', 'tool.exe', path
		)
		self.assertEqual(status, 1)
		errors = self.stderr.getvalue()
		self.assertIn('error UnsupportedConfiguration:', errors)
		self.assertIn('error InvalidFileVersion:', errors)
		self.assertFalse(os.path.exists(path))

	def test_locale_names_can_be_disabled(self):
		path = os.path.join(self.tmp, 'version.h')
		status = self.run_cli(
			'-c', 'Application', '-f', '1.0', '-t', 'tool.exe',
			'--language', 'de-DE', '--no-locale-names', path
		)
		self.assertEqual(status, 1)
		self.assertIn('error LanguageUnsupported:', self.stderr.getvalue())

	def test_missing_output_file(self):
		self.assertEqual(self.run_cli('-c', 'Application', '-f', '1.0'), 2)

	def test_unreadable_vars_file(self):
		status = self.run_cli('--vars', os.path.join(self.tmp, 'missing.mk'), 'x.h')
		self.assertEqual(status, 2)

if __name__ == '__main__':
	unittest.main()
