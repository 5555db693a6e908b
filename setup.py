import os

from setuptools import setup

# Compile the arithmetic with mypyc when asked to, e.g. QUADINT_COMPILE=1 pip install .
ext_modules = []
if os.environ.get("QUADINT_COMPILE") == "1":
    from mypyc.build import mypycify

    ext_modules = mypycify(["quadint/quad.py", "quadint/ntheory.py"])

setup(
    name="quadint",
    version="0.1.0",
    packages=["quadint"],
    install_requires=["sympy"],
    extras_require={"test": ["pytest"]},
    ext_modules=ext_modules,
    license="MIT",
)
