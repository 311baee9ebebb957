from rich.pretty import pprint

from chescli import *


def build(name, options, reporter):
    pprint({"subcommand": name, "options": options})
    for value in options.get("-out", []):
        reporter.log(log("notice", "writing", Description("{^file.path}: ", literal=value), "?%s bytes" % len(value)))


def clean(name, options, reporter):
    reporter.log(log("warning", "nothing to clean"))


if __name__ == '__main__':
    raise SystemExit(run_command("build", {"build": build, "clean": clean}, langpack=Langpack.builtin("en")))
