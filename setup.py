from setuptools import find_packages, setup

package_list = find_packages(
  include=[
    "refwatch",
    "refwatch.*",
  ]
)

setup(
  name="refwatch",
  version="0.1.0",
  description="List branch/tag references of remote git repositories and diff snapshots",
  python_requires=">=3.11",
  packages=package_list,
  include_package_data=True,
  install_requires=[
    "GitPython>=3.1.30",
    "pydantic>=2",
    "python-dotenv",
  ],
  extras_require={
    "dev": ["pytest", "pytest-asyncio", "pytest-cov"],
  },
  entry_points={
    "console_scripts": [
      "refwatch=refwatch.cli:main",
    ],
  },
)
