"""
Catalog Module - Fixed list of showcased projects

Project ids here are the values visitors subscribe to and the operator
broadcasts for.
"""

PROJECTS = [
    {
        'id': 'internsheep',
        'title': 'InternSheep / JobScanner',
        'highlight': 'Job scraping and aggregation tool that turns messy job listings '
                     'into clean, structured data for students and juniors.',
        'tech': 'Python · HTTP requests · concurrency · caching · CSV / data pipelines',
        'category': 'Tools / Data Pipelines',
        'status': 'Actively evolving',
        'github_url': 'https://github.com/yairthfc/Job-Scanner',
        'tags': ['Python', 'Data Pipelines', 'Automation', 'Scraping']
    },
    {
        'id': 'uthreads',
        'title': 'User-Level Thread Management Library',
        'highlight': 'Custom user-level threading library that implements scheduling, '
                     'context switching, and basic synchronization.',
        'tech': 'C / C++ · OS concepts · context switching · scheduling · low-level APIs',
        'category': 'Systems Programming',
        'status': 'Completed',
        'github_url': 'https://github.com/yairthfc/System_Level_Computing_Projects/tree/main/'
                      'User-Level-Thread-Management-Library',
        'tags': ['C / C++', 'Threads', 'Concurrency', 'Scheduling']
    },
    {
        'id': 'vm-manager',
        'title': 'Hierarchical Virtual Memory Management System',
        'highlight': 'Simulated virtual memory manager with hierarchical page tables, '
                     'page faults, swapping, and a custom eviction strategy.',
        'tech': 'C++ · virtual memory · hierarchical page tables · replacement algorithms',
        'category': 'Operating Systems',
        'status': 'Completed',
        'github_url': 'https://github.com/yairthfc/System_Level_Computing_Projects/tree/main/'
                      'Virtual-Memory-Management-System',
        'tags': ['C++', 'OS', 'Virtual Memory', 'Page Tables']
    },
    {
        'id': 'iml-hackathon',
        'title': 'IML Hackathon – Match & Importance Prediction',
        'highlight': 'Machine learning models predicting user match compatibility and how '
                     'much they value traits like ambition and creativity.',
        'tech': 'Python · pandas · scikit-learn · ML models · evaluation & reporting',
        'category': 'Machine Learning',
        'status': 'Hackathon',
        'github_url': 'https://github.com/yairthfc/ML-Prediction-Project',
        'tags': ['Python', 'ML', 'Hackathon', 'scikit-learn']
    },
    {
        'id': 'nanobody-structure-nn',
        'title': 'Nanobody 3D Structure Prediction Network',
        'highlight': 'Deep learning model that predicts nanobody backbone and Cβ coordinates '
                     'directly from sequence using 1D ResNet-style convolutions.',
        'tech': 'Python · TensorFlow / Keras · NumPy · BioPython · scikit-learn',
        'category': 'Machine Learning / Structural Biology',
        'status': 'Completed',
        'github_url': 'https://github.com/yairthfc/nanobody-3d-structure-network',
        'tags': ['Python', 'TensorFlow', 'Keras', 'ML', 'Structural Biology']
    }
]


def get_project(project_id):
    """Look up a catalog entry by id"""
    return next((p for p in PROJECTS if p['id'] == project_id), None)


def search_projects(query=None):
    """
    Filter the catalog by a free-text query

    Matches case-insensitively against title, highlight, tech, category and
    tags. A blank query returns every project.
    """
    if not query or not query.strip():
        return list(PROJECTS)

    q = query.strip().lower()
    results = []
    for project in PROJECTS:
        haystack = [project['title'], project['highlight'], project['tech'], project['category']]
        if any(q in field.lower() for field in haystack) or any(q in tag.lower() for tag in project['tags']):
            results.append(project)
    return results


__all__ = ['PROJECTS', 'get_project', 'search_projects']
