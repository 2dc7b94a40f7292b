#!/usr/bin/env python3
"""
Build script for the orders Lambda function.

Packages the function entry point together with the service package and,
optionally, its third-party dependencies into build/orders.zip.
"""
import argparse
import os
import shutil
import subprocess
import sys
import zipfile
from pathlib import Path

FUNCTION_NAME = "orders"


def main():
    """Main build function"""
    parser = argparse.ArgumentParser(description="Build the orders Lambda deployment package")
    parser.add_argument(
        "--with-dependencies",
        action="store_true",
        help="Install runtime dependencies into the package instead of relying on a layer",
    )
    args = parser.parse_args()

    project_root = Path(__file__).parent.parent
    src_dir = project_root / "src"
    build_dir = project_root / "build"
    function_dir = src_dir / FUNCTION_NAME
    zip_path = build_dir / f"{FUNCTION_NAME}.zip"

    # Create build directory
    build_dir.mkdir(exist_ok=True)

    print(f"Building {FUNCTION_NAME}...")

    # Create temporary directory for packaging
    temp_dir = build_dir / f"temp_{FUNCTION_NAME}"
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
    temp_dir.mkdir()

    # Copy entry point and the service package it imports
    shutil.copytree(function_dir, temp_dir, dirs_exist_ok=True)
    shutil.copytree(
        src_dir / "service",
        temp_dir / "service",
        ignore=shutil.ignore_patterns("__pycache__", "*.pyc"),
    )

    if args.with_dependencies:
        print(f"Installing dependencies for {FUNCTION_NAME}...")
        subprocess.run([
            sys.executable, "-m", "pip", "install",
            str(project_root),
            "-t", str(temp_dir),
        ], check=True)

    # Create zip archive
    print(f"Creating {FUNCTION_NAME}.zip...")
    with zipfile.ZipFile(zip_path, 'w', zipfile.ZIP_DEFLATED) as zipf:
        for root, _, files in os.walk(temp_dir):
            for file in files:
                file_path = Path(root) / file
                arcname = file_path.relative_to(temp_dir)
                zipf.write(file_path, arcname)

    # Clean up temporary directory
    shutil.rmtree(temp_dir)

    print(f"{FUNCTION_NAME}.zip created ({zip_path.stat().st_size} bytes)")
    print("Build complete!")


if __name__ == "__main__":
    main()
