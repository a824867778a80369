import cltoolbox

from METABtools.commands import compare, import_csv, run


def main():
    cltoolbox.command(run)
    cltoolbox.command(import_csv)
    cltoolbox.command(compare)
    cltoolbox.main()


if __name__ == "__main__":
    main()
