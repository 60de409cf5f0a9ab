"""Fixed markers written into generated descriptors."""

PROJECT_EXTENSION = ".csproj"
SOLUTION_EXTENSION = ".sln"

# Project type identifier for C# projects in solution files.
CSHARP_PROJECT_TYPE = "FAE04EC0-301F-11D3-BF4B-00C04F79EFBC"

SOLUTION_HEADER = (
    "Microsoft Visual Studio Solution File, Format Version 12.00",
    "# Visual Studio 15",
)

TOOLS_VERSION = "Current"
PRODUCT_VERSION = "10.0.20506"
SCHEMA_VERSION = "2.0"

DEFINE_SEPARATOR = ";"

CONFIGURATIONS = ("Debug", "Release")
OUTPUT_ROOT = "Temp/bin"
INTERMEDIATE_ROOT = "Temp/obj"

PROJECT_TEMPLATE = "project.csproj.j2"
SOLUTION_TEMPLATE = "solution.sln.j2"
