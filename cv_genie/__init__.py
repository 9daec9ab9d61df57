"""CV Genie: raw profile text in, job-tailored PDF CV out."""
