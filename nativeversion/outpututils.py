# Utility functions for writing generated files.

from io import open
from os import makedirs
from os.path import dirname, isdir, isfile
import sys

def createDirFor(filePath):
	'''Creates an output directory for containing the given file path.
	Nothing happens if the directory already exists.
	'''
	dirPath = dirname(filePath)
	if dirPath and not isdir(dirPath):
		makedirs(dirPath)

def rewriteIfChanged(path, text, log = sys.stdout):
	'''Writes the file with the given path if it does not exist yet or if its
	contents should change. Progress is reported on the "log" stream.
	Returns True if the file was (re)written, False otherwise.
	'''
	if isfile(path):
		with open(path, 'r', encoding='utf-8', newline='') as inp:
			oldText = inp.read()
		if text == oldText:
			print('Up to date: %s' % path, file=log)
			return False
		else:
			print('Updating %s...' % path, file=log)
	else:
		print('Creating %s...' % path, file=log)
		createDirFor(path)

	with open(path, 'w', encoding='utf-8', newline='') as out:
		out.write(text)
	return True
