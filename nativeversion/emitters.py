# Renders a FieldSet into source code for the native build.

fileHeaderComment = '''\
------------------------------------------------------------------------------
 <auto-generated>
     This code was generated by a tool.
     Runtime Version:4.0.30319.42000

     Changes to this file may cause incorrect behavior and will be lost if
     the code is regenerated.
 </auto-generated>
------------------------------------------------------------------------------
'''

versionStringDefine = '''\
#if defined(_UNICODE)
#define NBGV_VERSION_STRING(x) L ##x
#else
#define NBGV_VERSION_STRING(x) x
#endif'''

versionInfoResource = '''\
#ifdef RC_INVOKED

#include <winres.h>

VS_VERSION_INFO VERSIONINFO
  FILEVERSION     NBGV_FILE_MAJOR_VERSION,NBGV_FILE_MINOR_VERSION,NBGV_FILE_BUILD_VERSION,NBGV_FILE_REVISION_VERSION
  PRODUCTVERSION  NBGV_PRODUCT_MAJOR_VERSION,NBGV_PRODUCT_MINOR_VERSION,NBGV_PRODUCT_BUILD_VERSION,NBGV_PRODUCT_REVISION_VERSION
  FILEFLAGSMASK   0x3FL
#ifdef _DEBUG
  FILEFLAGS       0x1L
#else
  FILEFLAGS       0x0L
#endif
  FILEOS          0x4L
  FILETYPE        NBGV_FILE_TYPE
  FILESUBTYPE     0x0L
BEGIN
  BLOCK "StringFileInfo"
  BEGIN
    BLOCK NBGV_VERSION_BLOCK
    BEGIN
      VALUE "CompanyName", NGBV_COMPANY
      VALUE "FileDescription", NGBV_TITLE
      VALUE "FileVersion", NBGV_FILE_VERSION
      VALUE "InternalName", NGBV_INTERNAL_NAME
      VALUE "OriginalFilename", NGBV_FILE_NAME
      VALUE "ProductName", NGBV_PRODUCT
      VALUE "ProductVersion", NBGV_INFORMATIONAL_VERSION
      VALUE "LegalCopyright", NBGV_COPYRIGHT
    END
  END

  BLOCK "VarFileInfo"
  BEGIN
    VALUE "Translation", NBGV_LCID, NBGV_CODEPAGE
  END
END

#endif'''

class Emitter(object):
	'''Abstract base class for code generators.
	A subclass renders a FieldSet in one particular language. Rendering is
	a pure function of the FieldSet: all state lives in the generator that
	iterLines() returns.
	'''

	# Names under which this emitter can be selected; the first one is the
	# canonical name.
	languages = ()

	# Token that starts a line comment.
	commentToken = None

	@classmethod
	def getName(cls):
		return cls.languages[0]

	def iterComment(self, comment):
		for line in comment.splitlines():
			yield self.commentToken + line

	def iterLines(self, fieldSet):
		'''Iterates through the lines of the generated file, without line
		terminators.
		'''
		raise NotImplementedError

	def render(self, fieldSet):
		'''Returns the generated file contents as a single string.
		'''
		return ''.join(line + '\n' for line in self.iterLines(fieldSet))

def escapeString(value):
	'''Escapes a value for use in a C string literal. Only backslashes are
	escaped; the inputs must not contain quotes or line breaks.
	'''
	return value.replace('\\', '\\\\')

class CppEmitter(Emitter):
	'''C/C++ header that doubles as resource script (.rc) input.
	'''
	languages = ('c++', 'cpp', 'c')
	commentToken = '//'

	def iterDefines(self, fieldSet):
		for name, value in fieldSet.iterNumericFields():
			yield '#define %s %d' % (name, value)
		for name, value in fieldSet.iterStringFields():
			yield '#define %s NBGV_VERSION_STRING("%s")' % (
				name, escapeString(value)
				)

	def iterLines(self, fieldSet):
		yield '#pragma once'
		for line in self.iterComment(fileHeaderComment):
			yield line
		yield ''
		for line in versionStringDefine.splitlines():
			yield line
		yield ''
		for line in self.iterDefines(fieldSet):
			yield line
		yield ''
		for line in versionInfoResource.splitlines():
			yield line

def iterEmitters():
	'''Iterates through all available emitter classes.
	'''
	yield CppEmitter

def getEmitter(language):
	'''Returns an emitter for the given code language; case is ignored.
	Raises ValueError if no emitter exists for that language.
	'''
	if language is not None:
		wanted = language.strip().lower()
		for emitter in iterEmitters():
			if wanted in emitter.languages:
				return emitter()
	raise ValueError('No code generator for language "%s"' % language)
