#!/usr/bin/env python
import sys
import optparse
from contextlib import ExitStack, closing
from fqsample import utils
from fqsample.fastq import open_input, open_output, read_record, write_record, ClosingSink
from fqsample.sampling import make_rng, should_keep, check_percentage
from fqsample.sampling import add_sampling_options, check_sampling_options


def write_pair(fw1, fw2, record1, record2):
    # both mates are attempted before raising
    errors = []
    for fw, record in [[fw1, record1], [fw2, record2]]:
        try:
            write_record(fw, record)
        except utils.WriteError as e:
            errors.append(e)
    if len(errors) > 0:
        raise errors[0]


def run_pipeline(infile1, infile2, outfile1, outfile2, percentage, seed,
                 compress=False, verbose=False, max_line_length=0):
    """
    Subsample two mate files in lockstep. Each pair gets a single keep
    decision. Raises PairingError as soon as one file ends before the
    other; records written up to that point stay in the outputs.
    """
    check_percentage(percentage)
    rng = make_rng(seed)
    n_total = 0
    n_kept = 0

    with ExitStack() as stack:
        f1 = stack.enter_context(closing(open_input(infile1, "R1 input")))
        f2 = stack.enter_context(closing(open_input(infile2, "R2 input")))
        fw1 = stack.enter_context(ClosingSink(open_output(outfile1, compress, "R1 output"), "R1 output"))
        fw2 = stack.enter_context(ClosingSink(open_output(outfile2, compress, "R2 output"), "R2 output"))

        if verbose:
            print("Subsampling paired FASTQ files at %d%%" % percentage)
            print("Random seed: %d" % seed)

        while True:
            # both reads every iteration, R1 first
            record1 = read_record(f1, max_line_length, "R1 input")
            record2 = read_record(f2, max_line_length, "R2 input")
            if record1 is None and record2 is None:
                break
            if record1 is None or record2 is None:
                raise utils.PairingError(n_total + (record1 is not None),
                                         n_total + (record2 is not None))
            n_total += 1
            if should_keep(rng, percentage):
                write_pair(fw1, fw2, record1, record2)
                n_kept += 1

    if verbose:
        print("Total read pairs processed: %d" % n_total)
        print("Read pairs kept: %d (%.2f%%)" % (n_kept, utils.get_perc(n_kept, n_total)))
    return n_total, n_kept


usage = """fqsample SubsamplePaired [options] -a <R1.fastq> -b <R2.fastq> -x <out.R1.fastq> -y <out.R2.fastq>

Subsamples paired FASTQ files while maintaining read pairs. The inputs can
be gzip compressed. Exits with an error if R1 and R2 hold different numbers
of reads; outputs written before the error are not removed."""


def subsample_paired(args=None):
    parser = optparse.OptionParser(usage=usage)
    parser.add_option("-a", "--r1-input", dest="infile1", metavar="PATH",
                      help="Input R1 FASTQ file, plain or gzip. (required)")
    parser.add_option("-b", "--r2-input", dest="infile2", metavar="PATH",
                      help="Input R2 FASTQ file, plain or gzip. (required)")
    parser.add_option("-x", "--r1-output", dest="outfile1", metavar="PATH",
                      help="Output R1 FASTQ file. (required)")
    parser.add_option("-y", "--r2-output", dest="outfile2", metavar="PATH",
                      help="Output R2 FASTQ file. (required)")
    add_sampling_options(parser)
    options, args = parser.parse_args(args)
    if None in [options.infile1, options.infile2, options.outfile1, options.outfile2]:
        parser.error("Missing required arguments")
    check_sampling_options(parser, options)

    try:
        run_pipeline(options.infile1, options.infile2, options.outfile1, options.outfile2,
                     options.fraction, options.seed, compress=options.compress,
                     verbose=options.verbose, max_line_length=options.max_line_length)
    except utils.FastqSampleError as e:
        sys.stderr.write("Error: %s\n" % e)
        sys.exit(1)


if __name__ == "__main__":
    subsample_paired()
