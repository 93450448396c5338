import setuptools

with open("requirements.txt", "r") as f:
  requirements = [ 
    line.strip() for line in f.read().splitlines() 
    if line.strip() and not line.startswith("#") 
  ]

setuptools.setup(
  name="mapstore",
  version="1.0.0",
  description="Insertion ordered map with array style helpers.",
  python_requires=">=3.8,<4.0",
  packages=[ "mapstore" ],
  install_requires=requirements,
  extras_require={
    "test": [ "pytest" ],
  },
  include_package_data=True,
)
