#!/usr/bin/env python3
"""
Main entry point for the DevToolkit application.
This file serves as the application launcher that imports and runs the Flask app from the src directory.
"""

import sys
import os
import argparse
from pathlib import Path

# Add the src directory to the Python path so we can import from it
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from main import app

def get_config_directory():
    """Get the config directory path."""
    config_dir = os.environ.get('DEVTOOLKIT_CONFIG_DIR')
    if config_dir:
        return Path(config_dir)

    # Default to ~/.config/devtoolkit
    return Path.home() / '.config' / 'devtoolkit'

def write_port_file(port):
    """Write the port number to .port file for other processes to read."""
    config_dir = get_config_directory()
    config_dir.mkdir(parents=True, exist_ok=True)
    port_file = config_dir / ".port"
    with open(port_file, 'w') as f:
        f.write(str(port))
    print(f"Port {port} written to {port_file}")

def cleanup_port_file():
    """Remove the .port file on shutdown."""
    port_file = get_config_directory() / ".port"
    if port_file.exists():
        port_file.unlink()
        print("Port file cleaned up")

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='DevToolkit Server')
    parser.add_argument('--port', '-p', type=int, default=8000,
                       help='Port to run the server on (default: 8000)')
    parser.add_argument('--host', default='127.0.0.1',
                       help='Host to bind to (default: 127.0.0.1)')
    parser.add_argument('--debug', action='store_true',
                       help='Run Flask in debug mode')
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)

    # Relative config paths resolve against the project root
    os.chdir(project_root)
    write_port_file(args.port)

    try:
        print(f"Starting DevToolkit on http://{args.host}:{args.port}")
        app.run(host=args.host, port=args.port, debug=args.debug)
    except KeyboardInterrupt:
        print("\nServer stopped by user")
    finally:
        cleanup_port_file()

if __name__ == '__main__':
    main()
