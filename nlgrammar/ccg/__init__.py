"""CCG categories, parse-tree nodes and combinatory rules."""