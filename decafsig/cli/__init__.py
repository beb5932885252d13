from decafsig.cli.bench import main_bench
from decafsig.cli.golden import main_golden
from decafsig.cli.keygen import main_keygen
from decafsig.cli.sign import main_sign
from decafsig.cli.verify import main_verify
