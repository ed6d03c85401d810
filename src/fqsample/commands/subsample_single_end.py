#!/usr/bin/env python
import sys
import optparse
from contextlib import ExitStack, closing
from fqsample import utils
from fqsample.fastq import open_input, open_output, load_records, write_record, ClosingSink
from fqsample.sampling import make_rng, should_keep, check_percentage
from fqsample.sampling import add_sampling_options, check_sampling_options


def run_pipeline(infile, outfile, percentage, seed, compress=False, verbose=False, max_line_length=0):
    check_percentage(percentage)
    rng = make_rng(seed)
    n_total = 0
    n_kept = 0

    with ExitStack() as stack:
        f = stack.enter_context(closing(open_input(infile)))
        fw = stack.enter_context(ClosingSink(open_output(outfile, compress)))

        if verbose:
            print("Subsampling single-end FASTQ file at %d%%" % percentage)
            print("Random seed: %d" % seed)

        for record in load_records(f, max_line_length):
            n_total += 1
            if should_keep(rng, percentage):
                write_record(fw, record)
                n_kept += 1

    if verbose:
        print("Total reads processed: %d" % n_total)
        print("Reads kept: %d (%.2f%%)" % (n_kept, utils.get_perc(n_kept, n_total)))
    return n_total, n_kept


usage = """fqsample SubsampleSingleEnd [options] -i <input.fastq> -o <output.fastq>

Subsamples a single-end FASTQ file. The input can be gzip compressed."""


def subsample_single_end(args=None):
    parser = optparse.OptionParser(usage=usage)
    parser.add_option("-i", "--input", dest="infile", metavar="PATH",
                      help="Input FASTQ file, plain or gzip. (required)")
    parser.add_option("-o", "--output", dest="outfile", metavar="PATH",
                      help="Output FASTQ file. (required)")
    add_sampling_options(parser)
    options, args = parser.parse_args(args)
    if options.infile is None or options.outfile is None:
        parser.error("Missing required arguments")
    check_sampling_options(parser, options)

    try:
        run_pipeline(options.infile, options.outfile, options.fraction, options.seed,
                     compress=options.compress, verbose=options.verbose,
                     max_line_length=options.max_line_length)
    except utils.FastqSampleError as e:
        sys.stderr.write("Error: %s\n" % e)
        sys.exit(1)


if __name__ == "__main__":
    subsample_single_end()
