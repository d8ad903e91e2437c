"""支持 python -m si。"""

from si.cli.commands import main

if __name__ == "__main__":
    main()
