import random
import time

from mapstore import OrderedMap

ff = open("filter.tsv", "a")
sf = open("split.tsv", "a")
idxf = open("index_of.tsv", "a")

def mkdataset(datasize):
  return OrderedMap(
    (random.randint(0, 1000000000), random.randint(0, 1000))
    for _ in range(datasize)
  )

def time_filter(store):
  s = time.time()
  store.filter(lambda v: v % 2 == 0)
  t = time.time() - s
  ff.write(f"{len(store)}\t{t*1000:.5f}\n")
  ff.flush()

def time_split(store):
  s = time.time()
  store.split(lambda v, k, i: i % 2 == 0)
  t = time.time() - s
  sf.write(f"{len(store)}\t{t*1000:.5f}\n")
  sf.flush()

def time_index_of(store):
  labels = store.keys()
  random.shuffle(labels)
  labels = labels[:max(len(store) // 100, 1)]

  s = time.time()
  for label in labels:
    store.index_of(label)
  t = time.time() - s
  idxf.write(f"{len(store)}\t{t*1000:.5f}\n")
  idxf.flush()

sz = 1
while sz < 1000000:
  store = mkdataset(sz)
  time_filter(store)
  time_split(store)
  time_index_of(store)
  sz *= 2

ff.close()
sf.close()
idxf.close()
