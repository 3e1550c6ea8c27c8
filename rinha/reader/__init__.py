from rinha.reader.json_reader import load, loads, term_from_dict, file_from_dict

__all__ = ["load", "loads", "term_from_dict", "file_from_dict"]
