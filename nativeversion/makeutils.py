# Reads build inputs from Makefile-style variable definitions.
# Only plain assignments are understood: "=", ":=" and "+=", with "$(NAME)"
# references to earlier variables. Conditionals, functions and rules are
# ignored, which is fine for the generated .mk files this is meant for.

from io import open
import re

_reAssign = re.compile(r'\s*([A-Za-z0-9_]+)\s*([+:]?=)(.*)$')
_reReference = re.compile(r'\$\(([A-Za-z0-9_]+)\)')

def joinContinuedLines(lines):
	'''Iterates through the given lines without line terminators, merging
	lines that end in a backslash with the line that follows.
	Raises ValueError if the last line is continued.
	'''
	buf = ''
	for line in lines:
		line = line.rstrip('\r\n')
		if line.endswith('\\'):
			buf += line[ : -1]
		else:
			yield buf + line
			buf = ''
	if buf:
		raise ValueError('Continuation on last line')

def expandReferences(expr, makeVars):
	'''Replaces each "$(NAME)" in the expression by the variable's value.
	Raises KeyError if the expression references a non-existing variable.
	Raises ValueError if a reference is not closed.
	'''
	expanded = _reReference.sub(lambda match: makeVars[match.group(1)], expr)
	if '$(' in expanded:
		raise ValueError('Unterminated reference in "%s"' % expr)
	return expanded

def parseMakeVariables(lines, makeVars = None):
	'''Collects the variable definitions in the given Makefile lines.
	The optional makeVars argument holds variables that are already defined;
	they are included in the result, but the given dictionary is not
	modified.
	Returns a dictionary that maps each variable name to its value.
	'''
	makeVars = {} if makeVars is None else dict(makeVars)
	for line in joinContinuedLines(lines):
		match = _reAssign.match(line)
		if match is None:
			continue
		name, assign, value = match.groups()
		value = value.strip()
		if assign == ':=':
			makeVars[name] = expandReferences(value, makeVars)
		elif assign == '+=':
			# Appended text is kept as written, like "=" values.
			makeVars[name] = ' '.join(
				part for part in (makeVars.get(name, ''), value) if part
				)
		else:
			makeVars[name] = value
	return makeVars

def extractMakeVariables(filePath, makeVars = None):
	'''Collects the variable definitions in the given Makefile.
	See parseMakeVariables() for details.
	'''
	with open(filePath, 'r', encoding='utf-8') as inp:
		return parseMakeVariables(inp, makeVars)
