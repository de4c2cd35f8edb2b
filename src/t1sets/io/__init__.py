from .export import write_to_file, write_to_file_high_res
