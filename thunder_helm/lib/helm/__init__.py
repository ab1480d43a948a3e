from .chart import Chart, ChartArgs
from .construct import construct, release_options
from .convert import release_args_dict, to_release_args
from .defaults import init_defaults
from .errors import ChartArgsError, ChartTypeMismatchError
from .release import ReleaseType, RepositoryOpts, FIELD_HELM_OPTIONS_INPUT, FIELD_HELM_STATUS_OUTPUT
