# Find the applicant-tracking system behind a company careers page
