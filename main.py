from nbcv.datasets import load_records
from nbcv.executions import cross_validation
from nbcv.executions import format_report
from nbcv.executions import CROSSVALIDATION_SPLITS

base_path = "./UCIREPO/"
filename = "house-votes-84.data"
n_splits = CROSSVALIDATION_SPLITS
seed = None
verbose = 0

data = load_records(base_path + filename)
result = cross_validation(data, n_splits=n_splits, random_state=seed, verbose=verbose)
print(format_report(result))
