
import toml

__all__ = ['Config', 'load_config']

class Config:
	'''
	The graphwalk TOML config file, which only holds default file names for
	the command line tools:

	    [make]
	    makefile = "Makefile"
	    fileinfo = "fileinfo"

	    [trip]
	    map = "Map"

	Any key may be left out.  Options given on the command line take
	precedence over the config file.
	'''
	DEFAULT_MAKEFILE = 'Makefile'
	DEFAULT_FILEINFO = 'fileinfo'
	DEFAULT_MAP      = 'Map'

	def __init__(self, makefile=None, fileinfo=None, map=None):
		self.__makefile = self.DEFAULT_MAKEFILE
		self.__fileinfo = self.DEFAULT_FILEINFO
		self.__map      = self.DEFAULT_MAP
		if makefile is not None: self.set_makefile(makefile)
		if fileinfo is not None: self.set_fileinfo(fileinfo)
		if map is not None: self.set_map(map)

	def set_makefile(self, path): self.__makefile = str(path)
	def set_fileinfo(self, path): self.__fileinfo = str(path)
	def set_map(self, path):      self.__map = str(path)

	def get_makefile(self): return self.__makefile
	def get_fileinfo(self): return self.__fileinfo
	def get_map(self):      return self.__map

	@classmethod
	def from_file(cls, path):
		with open(path) as f:
			s = f.read()
		return cls.deserialize(s)

	def save(self, path):
		s = self.serialize()
		with open(path, 'w') as f:
			f.write(s)

	@classmethod
	def deserialize(cls, s):
		d = toml.loads(s)
		make = d.get('make', {})
		trip = d.get('trip', {})
		return cls(
			makefile=make.get('makefile'),
			fileinfo=make.get('fileinfo'),
			map=trip.get('map'),
		)

	def serialize(self):
		d = {
			'make': {
				'makefile': self.__makefile,
				'fileinfo': self.__fileinfo,
			},
			'trip': {
				'map': self.__map,
			},
		}
		return toml.dumps(d)

	def __eq__(self, other):
		return type(self) is type(other) and self.serialize() == other.serialize()

def load_config(path=None):
	''' Read ``path`` if given, else use the defaults. '''
	if path is None:
		return Config()
	return Config.from_file(path)
