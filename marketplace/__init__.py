"""FreelancerWorks - two-sided job marketplace service."""
