# coding: utf-8
# (c) Copyright IBM Corp. 2025

from os import path

from setuptools import find_packages, setup

# Import README.md into long_description
pwd = path.abspath(path.dirname(__file__))

with open(path.join(pwd, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

# Read the version without importing the package (and its dependencies)
about = {}
with open(path.join(pwd, 'src', 'eks_detector', 'version.py'), encoding='utf-8') as f:
    exec(f.read(), about)


setup(name='eks-resource-detector',
      version=about['VERSION'],
      license='MIT',
      description='OpenTelemetry resource detector for AWS Elastic Kubernetes Service (EKS)',
      package_dir={'': 'src'},
      packages=find_packages(where='src', exclude=['tests']),
      long_description=long_description,
      long_description_content_type='text/markdown',
      zip_safe=False,
      python_requires='>=3.8',
      install_requires=['opentelemetry-api>=1.12.0',
                        'opentelemetry-sdk>=1.12.0',
                        'opentelemetry-semantic-conventions>=0.33b0',
                        'PyYAML>=5.4',
                        'requests>=2.6.0',
                        'urllib3>=1.26.5',],
      extras_require={
          'test': ['mock>=4.0',
                   'pytest>=6.2',
                   'pytest-mock>=3.0',],
      },
      entry_points={
                    'opentelemetry_resource_detector': [
                        'aws_eks = eks_detector.detector:AwsEksResourceDetector',
                    ],
                    },
      keywords=['opentelemetry', 'resource-detector', 'aws', 'eks', 'kubernetes',
                'observability'],
      classifiers=[
          'Development Status :: 5 - Production/Stable',
          'Intended Audience :: Developers',
          'Intended Audience :: System Administrators',
          'License :: OSI Approved :: MIT License',
          'Operating System :: POSIX :: Linux',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
          'Programming Language :: Python :: 3.8',
          'Programming Language :: Python :: 3.9',
          'Programming Language :: Python :: 3.10',
          'Programming Language :: Python :: 3.11',
          'Programming Language :: Python :: 3.12',
          'Topic :: System :: Monitoring',
          'Topic :: Software Development :: Libraries :: Python Modules'])
