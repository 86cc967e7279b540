"""Mock candidates loaded into a fresh store"""

import random
from typing import List

from backend.app.models.candidate import Candidate

FEATURED_CANDIDATES = [
    {
        "name": "Alex Chen",
        "title": "Senior Full Stack Developer",
        "location": "San Francisco, CA",
        "company": "Meta",
        "experience": "5 years",
        "image_url": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=150&h=150&fit=crop",
        "overall_score": 3487,
        "skills_score": 3500,
        "certifications_score": 3800,
        "experience_score": 3200,
        "industry_score": 3450,
        "skills": ["React", "Node.js", "AWS", "Python", "TypeScript", "Docker", "Kubernetes", "GraphQL"],
        "badge": "Elite Pro",
        "region": "North America",
        "industry": "Technology",
    },
    {
        "name": "Sarah Johnson",
        "title": "Principal Data Scientist",
        "location": "New York, NY",
        "company": "Google",
        "experience": "7 years",
        "image_url": "https://images.unsplash.com/photo-1494790108755-2616b612b1ac?w=150&h=150&fit=crop",
        "overall_score": 3421,
        "skills_score": 3450,
        "certifications_score": 3700,
        "experience_score": 3100,
        "industry_score": 3300,
        "skills": ["Python", "TensorFlow", "SQL", "Azure", "Spark", "Tableau", "R", "MLOps"],
        "badge": "Top 1%",
        "region": "North America",
        "industry": "Technology",
    },
    {
        "name": "Michael Rodriguez",
        "title": "DevOps Architect",
        "location": "Austin, TX",
        "company": "Microsoft",
        "experience": "6 years",
        "image_url": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=150&h=150&fit=crop",
        "overall_score": 3398,
        "skills_score": 3400,
        "certifications_score": 3600,
        "experience_score": 3250,
        "industry_score": 3350,
        "skills": ["Kubernetes", "AWS", "Terraform", "Jenkins", "Docker", "Prometheus", "Grafana", "Python"],
        "badge": "Elite Pro",
        "region": "North America",
        "industry": "Technology",
    },
    {
        "name": "Emma Watson",
        "title": "ML Engineer",
        "location": "Seattle, WA",
        "company": "Amazon",
        "experience": "4 years",
        "image_url": "https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=150&h=150&fit=crop",
        "overall_score": 3276,
        "skills_score": 3300,
        "certifications_score": 3100,
        "experience_score": 3200,
        "industry_score": 3400,
        "skills": ["PyTorch", "Python", "GCP", "MLOps", "Kubernetes", "TensorFlow", "Scikit-learn"],
        "badge": "Rising Talent",
        "region": "North America",
        "industry": "Technology",
    },
    {
        "name": "David Kim",
        "title": "Backend Engineer",
        "location": "Boston, MA",
        "company": "Stripe",
        "experience": "4 years",
        "image_url": "https://images.unsplash.com/photo-1500648767791-00dcc994a43e?w=150&h=150&fit=crop",
        "overall_score": 3198,
        "skills_score": 3250,
        "certifications_score": 2900,
        "experience_score": 3300,
        "industry_score": 3200,
        "skills": ["Java", "Spring Boot", "PostgreSQL", "Redis", "Kafka", "Docker", "AWS"],
        "badge": "Top 1%",
        "region": "North America",
        "industry": "Fintech",
    },
]

# Only the headline score is fixed; sub-scores are jittered around it
ADDITIONAL_CANDIDATES = [
    {"name": "Lisa Chang", "title": "Frontend Developer", "location": "Toronto, CA", "company": "Shopify", "experience": "3 years", "overall_score": 3156},
    {"name": "James Wilson", "title": "Security Engineer", "location": "London, UK", "company": "Palantir", "experience": "8 years", "overall_score": 3089},
    {"name": "Maria Garcia", "title": "Product Manager", "location": "Madrid, ES", "company": "Spotify", "experience": "6 years", "overall_score": 3045},
    {"name": "Ryan O'Connor", "title": "iOS Developer", "location": "Dublin, IE", "company": "Apple", "experience": "5 years", "overall_score": 2987},
    {"name": "Priya Patel", "title": "Cloud Architect", "location": "Mumbai, IN", "company": "Zomato", "experience": "7 years", "overall_score": 2934},
    {"name": "Sophie Martin", "title": "UX Designer", "location": "Paris, FR", "company": "Figma", "experience": "4 years", "overall_score": 2876},
    {"name": "Hassan Ali", "title": "Blockchain Developer", "location": "Dubai, AE", "company": "Binance", "experience": "3 years", "overall_score": 2823},
    {"name": "Anna Kowalski", "title": "QA Engineer", "location": "Warsaw, PL", "company": "CD Projekt", "experience": "5 years", "overall_score": 2778},
    {"name": "Carlos Santos", "title": "Data Engineer", "location": "São Paulo, BR", "company": "Nubank", "experience": "4 years", "overall_score": 2734},
    {"name": "Yuki Tanaka", "title": "Game Developer", "location": "Tokyo, JP", "company": "Nintendo", "experience": "6 years", "overall_score": 2689},
]

COMMON_SKILLS = ["JavaScript", "Python", "React", "AWS"]

REGION_BY_COUNTRY = {
    "US": "North America",
    "CA": "North America",
    "UK": "Europe",
    "IE": "Europe",
    "FR": "Europe",
    "ES": "Europe",
    "PL": "Europe",
    "AE": "Middle East",
    "IN": "Asia Pacific",
    "JP": "Asia Pacific",
    "BR": "Latin America",
}
DEFAULT_REGION = "Asia Pacific"


def region_for_location(location: str) -> str:
    """Region label from the trailing country code of ``City, CC``"""
    country = location.rsplit(",", 1)[-1].strip().upper()
    return REGION_BY_COUNTRY.get(country, DEFAULT_REGION)


def build_seed_candidates(seed: int = 42) -> List[Candidate]:
    """
    Build the mock candidate set

    Args:
        seed: Seed for the sub-score jitter, so every start produces the
            same leaderboard

    Returns:
        Candidates with their listed overall scores; ranks are left for the
        repository to compute
    """
    rng = random.Random(seed)
    candidates = [Candidate(**data) for data in FEATURED_CANDIDATES]

    for index, data in enumerate(ADDITIONAL_CANDIDATES):
        overall = data["overall_score"]
        candidates.append(Candidate(
            **data,
            image_url=f"https://images.unsplash.com/photo-150780321{index}?w=150&h=150&fit=crop",
            skills_score=overall + rng.randrange(200) - 100,
            certifications_score=overall + rng.randrange(300) - 150,
            experience_score=overall + rng.randrange(200) - 100,
            industry_score=overall + rng.randrange(200) - 100,
            skills=COMMON_SKILLS[:rng.randint(2, 4)],
            badge="Top 1%" if overall > 3000 else "Rising Talent",
            region=region_for_location(data["location"]),
            industry="Technology",
        ))

    return candidates
