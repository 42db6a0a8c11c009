import os
import tempfile
import unittest

from nativeversion.makeutils import (
	expandReferences, extractMakeVariables, joinContinuedLines,
	parseMakeVariables
)

class MakeVariableTests(unittest.TestCase):
	def test_assignments(self):
		makeVars = parseMakeVariables([
			'# version inputs\n',
			'ASSEMBLY_NAME = Contoso.Tool\n',
			'TARGET_FILE_NAME := $(ASSEMBLY_NAME).exe\n',
			'ASSEMBLY_TITLE=Contoso\n',
			'ASSEMBLY_TITLE += Tool\n',
			'ASSEMBLY_COMPANY += Contoso Ltd\n',
		])
		self.assertEqual(makeVars, {
			'ASSEMBLY_NAME': 'Contoso.Tool',
			'TARGET_FILE_NAME': 'Contoso.Tool.exe',
			'ASSEMBLY_TITLE': 'Contoso Tool',
			'ASSEMBLY_COMPANY': 'Contoso Ltd',
		})

	def test_recursive_assignment_is_not_expanded(self):
		makeVars = parseMakeVariables(['A = $(B)\n'])
		self.assertEqual(makeVars, {'A': '$(B)'})

	def test_existing_variables_are_not_modified(self):
		existing = {'A': '1'}
		makeVars = parseMakeVariables(['B := $(A).2\n'], existing)
		self.assertEqual(makeVars, {'A': '1', 'B': '1.2'})
		self.assertEqual(existing, {'A': '1'})

	def test_windows_line_endings(self):
		makeVars = parseMakeVariables(['A = 1\r\n', 'B = x \\\r\n', 'y\r\n'])
		self.assertEqual(makeVars, {'A': '1', 'B': 'x y'})

	def test_continued_lines(self):
		self.assertEqual(
			list(joinContinuedLines(['A = 1 \\\n', '2\n', 'B = 3'])),
			['A = 1 2', 'B = 3']
		)
		with self.assertRaises(ValueError):
			list(joinContinuedLines(['A = 1 \\\n']))

	def test_reference_errors(self):
		with self.assertRaises(KeyError):
			expandReferences('$(MISSING)', {})
		with self.assertRaises(ValueError):
			expandReferences('$(OPEN', {'OPEN': 'x'})

	def test_extract_from_file(self):
		with tempfile.TemporaryDirectory() as tmp:
			path = os.path.join(tmp, 'version.mk')
			with open(path, 'w', encoding='utf-8') as out:
				out.write('ASSEMBLY_FILE_VERSION = 1.2.3.4\n')
			self.assertEqual(
				extractMakeVariables(path), {'ASSEMBLY_FILE_VERSION': '1.2.3.4'}
			)

if __name__ == '__main__':
	unittest.main()
