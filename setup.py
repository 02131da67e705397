from setuptools import setup, find_packages

setup(
    name="fieldmath",
    version="0.1.0",
    url="https://github.com/klamt-lab/fieldmath.git",
    description="Exact rational arithmetic and linear algebra over arbitrary fields",
    long_description=("Exact rational numbers and generic vectors and matrices over arbitrary algebraic fields, "
                      "with dense and sparse storage, LU based solve, inverse and determinant and a concurrent "
                      "matrix multiplication engine"),
    long_description_content_type="text/plain",
    author="Philipp Schneider",
    author_email="zgddtgt@gmail.com",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["fieldmath", "fieldmath.*"]),
    install_requires=["numpy", "scipy", "sympy", "psutil"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    project_urls={
        "Bug Reports": "https://github.com/klamt-lab/fieldmath/issues",
        "Source": "https://github.com/klamt-lab/fieldmath/",
    },
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["rational numbers", "linear algebra", "sparse matrix", "LU decomposition", "finite fields"],
    zip_safe=False,
)
