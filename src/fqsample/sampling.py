import random
import time
from fqsample.utils import ConfigError

MIN_PERCENTAGE = 1
MAX_PERCENTAGE = 100


def default_seed():
    return int(time.time())


def make_rng(seed):
    return random.Random(seed)


def check_percentage(percentage):
    if percentage < MIN_PERCENTAGE or percentage > MAX_PERCENTAGE:
        raise ConfigError("Subsampling fraction must be between %d and %d" % (MIN_PERCENTAGE, MAX_PERCENTAGE))
    return percentage


def should_keep(rng, percentage):
    """
    Draw one integer in [0, 99] from rng and keep the record (or pair)
    when it is below percentage. Call once per record in single-end mode
    and once per pair in paired mode, never once per mate.
    """
    return rng.randrange(100) < percentage


def add_sampling_options(parser):
    parser.add_option("-f", "--fraction", dest="fraction", type="int", default=10, metavar="INT",
                      help="Subsampling fraction in percent, 1-100. [%default]")
    parser.add_option("-s", "--seed", dest="seed", type="int", default=None, metavar="INT",
                      help="Random seed. [current time]")
    parser.add_option("-z", "--compress", dest="compress", action="store_true", default=False,
                      help="Compress output with gzip (BGZF). [%default]")
    parser.add_option("-l", "--max-line-length", dest="max_line_length", type="int", default=0, metavar="INT",
                      help="Fail on lines longer than INT bytes, 0 for no limit. [%default]")
    parser.add_option("-v", "--verbose", dest="verbose", action="store_true", default=False,
                      help="Verbose output. [%default]")


def check_sampling_options(parser, options):
    try:
        check_percentage(options.fraction)
    except ConfigError as e:
        parser.error(str(e))
    if options.max_line_length < 0:
        parser.error("Maximal line length must not be negative")
    if options.seed is None:
        options.seed = default_seed()
