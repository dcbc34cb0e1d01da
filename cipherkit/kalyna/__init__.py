"""Empty package: it holds no modules and provides no cipher."""