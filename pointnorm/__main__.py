try:
    from .cli import main
except ImportError:
    # Bundled as a top-level script (e.g. PyInstaller) there is no parent package.
    from pointnorm.cli import main

if __name__ == '__main__':
    raise SystemExit(main())
