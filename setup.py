from setuptools import setup
from setuptools import find_packages

setup(
	name='graphwalk',
	version = '0.1',
	description = 'Visitor-driven graph traversals, with make and trip tools built on them',
	python_requires='>=3.7',

	entry_points={
		'console_scripts':[
			'graphwalk-make = graphwalk.make.main:main',
			'graphwalk-trip = graphwalk.trip.main:main',
		],
	},

	install_requires=[
		'networkx',
		'toml',
	],

	packages=find_packages(include=['graphwalk', 'graphwalk.*']), # include sub-packages
)
