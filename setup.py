from setuptools import setup, find_packages

setup(
    name="exactsimplex",
    version="1.0",
    description="Tableau simplex solver with exact rational arithmetic",
    long_description=("Primal tableau simplex method for linear programs in standard form, pivoting on exact "
                      "fractions so that no rounding error accumulates"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["exactsimplex", "exactsimplex.*"]),
    install_requires=["numpy", "scipy", "sympy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear programming", "simplex", "tableau", "exact arithmetic", "fractions"],
    zip_safe=False,
)
