from setuptools import setup, find_packages

setup(
    name="wui",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "httpx>=0.24",
        "tenacity>=8.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["wui=wui.cli:main"],
    },
    description="Current weather at your IP location via Radar and OpenWeatherMap clients.",
    author="bitcrshr",
    author_email="",
    include_package_data=True,
)
