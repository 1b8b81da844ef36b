
__all__ = [
	'window2',
	'unique',
]

def window2(it):
	'''
	Get (overlapping) adjacent pairs from an iterable.

	>>> list(window2('abcd'))
	[('a', 'b'), ('b', 'c'), ('c', 'd')]
	>>> list(window2([1])) # no "pairs"
	[]
	'''
	it = iter(it) # allow next() to consume elements

	try: prev = next(it)
	except StopIteration:  # 0-length list
		return

	for x in it:
		yield (prev,x)
		prev = x

def unique(it):
	'''
	Drop repeated items from an iterable, keeping the first of each.

	>>> unique(['b', 'a', 'b', 'c', 'a'])
	['b', 'a', 'c']
	'''
	seen = set()
	result = []
	for x in it:
		if x not in seen:
			seen.add(x)
			result.append(x)
	return result
