from ._split_test import test_folds_cover_every_record_once
from ._split_test import test_fold_sizes_differ_at_most_one
from ._split_test import test_shuffled_assignment
from ._split_test import test_same_seed_same_folds
from ._split_test import test_injected_random_state
from ._split_test import test_invalid_n_splits
from ._naive_bayes_test import test_two_records
from ._naive_bayes_test import test_likelihood_denominator_is_training_size
from ._naive_bayes_test import test_likelihoods_strictly_positive
from ._naive_bayes_test import test_log_score_is_sum_of_log10
from ._naive_bayes_test import test_tie_goes_to_lowest_class
from ._naive_bayes_test import test_unseen_class_is_never_predicted
from ._naive_bayes_test import test_single_record_accuracy
from ._naive_bayes_test import test_accuracy_in_unit_interval
from ._naive_bayes_test import test_records_and_arrays_agree
from ._naive_bayes_test import test_determinism
from ._naive_bayes_test import test_predict_proba
from ._naive_bayes_test import test_empty_sets
from ._naive_bayes_test import test_invalid_input
from ._naive_bayes_test import test_score_rejects_labels_with_records
from ._naive_bayes_test import test_non_integral_ordinals_are_rejected
from ._cross_validation_test import test_mean_is_average_of_folds
from ._cross_validation_test import test_folds_are_reused_across_rounds
from ._cross_validation_test import test_same_seed_same_result
from ._cross_validation_test import test_leave_one_out
from ._cross_validation_test import test_invalid_configuration
from ._cross_validation_test import test_report
from ._loader_test import test_load_records
from ._loader_test import test_unknown_class_is_fatal
from ._loader_test import test_malformed_files
from ._loader_test import test_choice_encoder
from ._loader_test import test_class_encoder
from ._loader_test import test_load_and_cross_validate
from ._loader_test import test_short_line_is_rejected
from ._loader_test import test_empty_field_is_unknown

__all__ = [
    "test_folds_cover_every_record_once",
    "test_fold_sizes_differ_at_most_one",
    "test_shuffled_assignment",
    "test_same_seed_same_folds",
    "test_injected_random_state",
    "test_invalid_n_splits",
    "test_two_records",
    "test_likelihood_denominator_is_training_size",
    "test_likelihoods_strictly_positive",
    "test_log_score_is_sum_of_log10",
    "test_tie_goes_to_lowest_class",
    "test_unseen_class_is_never_predicted",
    "test_single_record_accuracy",
    "test_accuracy_in_unit_interval",
    "test_records_and_arrays_agree",
    "test_determinism",
    "test_predict_proba",
    "test_empty_sets",
    "test_invalid_input",
    "test_score_rejects_labels_with_records",
    "test_non_integral_ordinals_are_rejected",
    "test_mean_is_average_of_folds",
    "test_folds_are_reused_across_rounds",
    "test_same_seed_same_result",
    "test_leave_one_out",
    "test_invalid_configuration",
    "test_report",
    "test_load_records",
    "test_unknown_class_is_fatal",
    "test_malformed_files",
    "test_choice_encoder",
    "test_class_encoder",
    "test_load_and_cross_validate",
    "test_short_line_is_rejected",
    "test_empty_field_is_unknown",
]
