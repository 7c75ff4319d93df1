from setuptools import setup, find_namespace_packages


setup(
    name="archivejson",
    version="0.1.0",
    description="Build action that turns compiled Go archive arguments into a packages-driver JSON record",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["archivejson", "archivejson.*"]),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["archivejson = archivejson.cli:main"]},
)
